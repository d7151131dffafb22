"""Unit tests for the portal-management-service façade."""

from __future__ import annotations

import httpx
import pytest
from respx import MockRouter

from adapters.services.portal import PortalController
from conftest import BASE_URL, assert_query_and_body, forward, last_json
from core.config import AppSettings

URL = f"{BASE_URL}/portal-management-service"


@pytest.fixture
def portals(settings: AppSettings) -> PortalController:
    return PortalController(settings)


@pytest.mark.asyncio
async def test_fetch_all_filters(portals: PortalController, respx_mock: MockRouter) -> None:
    route = respx_mock.get(f"{URL}/portals").mock(return_value=httpx.Response(200, json=[]))

    await portals.fetch_all()
    assert dict(route.calls.last.request.url.params) == {"ignoreInactivePortals": "false"}

    await portals.fetch_all(ignore_inactive_portals=True, portal_type="IS24")
    assert dict(route.calls.last.request.url.params) == {"ignoreInactivePortals": "true", "type": "IS24"}


@pytest.mark.asyncio
async def test_create_merges_caller_headers(portals: PortalController, respx_mock: MockRouter) -> None:
    route = respx_mock.post(f"{URL}/portals/create/OPENIMMO").mock(return_value=httpx.Response(201, json={"id": "p-1"}))

    response = await portals.create(
        "OPENIMMO",
        {"name": "Homepage", "ftpHost": "ftp.example.com"},
        params={"companyMarket": "DE"},
        headers={"x-ff-version": 2},
    )

    request = route.calls.last.request
    assert request.headers["content-type"] == "application/json"
    assert request.headers["x-ff-version"] == "2"
    assert request.url.params["companyMarket"] == "DE"
    assert last_json(route) == {"name": "Homepage", "ftpHost": "ftp.example.com"}
    assert response.data == {"id": "p-1"}


@pytest.mark.asyncio
async def test_is24_callback_maps_oauth_params(portals: PortalController, respx_mock: MockRouter) -> None:
    route = respx_mock.get(f"{URL}/portals/is24/authenticate/p-1/callback").mock(return_value=httpx.Response(204))

    await portals.is24_authentication_callback("p-1", "verifier", "token", "state")

    assert dict(route.calls.last.request.url.params) == {
        "oauth_verifier": "verifier",
        "oauth_token": "token",
        "state": "state",
    }


@pytest.mark.asyncio
async def test_update_and_authenticate(portals: PortalController, respx_mock: MockRouter) -> None:
    update = respx_mock.patch(f"{URL}/portals/p-1").mock(return_value=httpx.Response(200, json={}))
    auth = respx_mock.post(f"{URL}/portals/p-1/authenticate").mock(return_value=httpx.Response(200, json={}))

    await portals.update("p-1", {"ftpPort": 2121})
    await portals.authenticate("p-1", {"username": "agent", "password": "secret"})

    assert last_json(update) == {"ftpPort": 2121}
    assert last_json(auth) == {"username": "agent", "password": "secret"}


@pytest.mark.asyncio
async def test_force_delete_failure_is_handled(portals: PortalController, respx_mock: MockRouter) -> None:
    respx_mock.delete(f"{URL}/portals/p-1/force").mock(
        return_value=httpx.Response(409, json={"error": "Portal has published estates"})
    )

    response = await portals.force_delete("p-1")

    assert response.error is not None
    assert response.error.message == "Portal has published estates"


@pytest.mark.asyncio
async def test_portal_types_by_market(portals: PortalController, respx_mock: MockRouter) -> None:
    types = respx_mock.get(f"{URL}/portalTypes").mock(return_value=httpx.Response(200, json=["IS24"]))
    predefined = respx_mock.get(f"{URL}/predefinedPortals").mock(return_value=httpx.Response(200, json=[]))

    await portals.fetch_portal_types("AT")
    await portals.fetch_predefined_portals()

    assert dict(types.calls.last.request.url.params) == {"companyMarket": "AT"}
    assert dict(predefined.calls.last.request.url.params) == {}


@pytest.mark.parametrize(
    ("method_name", "args", "verb", "path", "query", "body"),
    [
        ("fetch_all", (), "GET", "/portals", {"ignoreInactivePortals": "false"}, None),
        ("fetch", ("p-1",), "GET", "/portals/p-1", {}, None),
        ("delete", ("p-1",), "DELETE", "/portals/p-1", {}, None),
        ("update", ("p-1", {"name": "Homepage"}), "PATCH", "/portals/p-1", {}, {"name": "Homepage"}),
        ("authenticate", ("p-1", {"username": "agent"}), "POST", "/portals/p-1/authenticate", {}, {"username": "agent"}),
        ("check_authentication", ("p-1",), "GET", "/portals/p-1/checkAuthentication", {}, None),
        ("force_delete", ("p-1",), "DELETE", "/portals/p-1/force", {}, None),
        ("create", ("IS24", {"name": "IS24"}), "POST", "/portals/create/IS24", {}, {"name": "IS24"}),
        ("create", ("IS24",), "POST", "/portals/create/IS24", {}, None),
        (
            "is24_authentication_callback",
            ("p-1", "v", "t", "s"),
            "GET",
            "/portals/is24/authenticate/p-1/callback",
            {"oauth_verifier": "v", "oauth_token": "t", "state": "s"},
            None,
        ),
        ("fetch_portal_types", ("DE",), "GET", "/portalTypes", {"companyMarket": "DE"}, None),
        ("fetch_predefined_portals", ("DE",), "GET", "/predefinedPortals", {"companyMarket": "DE"}, None),
    ],
)
@pytest.mark.asyncio
async def test_portal_controller_forwarding(
    portals: PortalController,
    respx_mock: MockRouter,
    method_name: str,
    args: tuple,
    verb: str,
    path: str,
    query: dict,
    body: object,
) -> None:
    request = await forward(respx_mock, portals, method_name, args, verb, path)
    assert_query_and_body(request, query, body)
