"""Shared fixtures: isolated settings and a pooled client for respx mocking."""

from __future__ import annotations

import asyncio
import json
from collections.abc import AsyncIterator
from typing import Any

import httpx
import pytest
from respx import MockRouter, Route

from adapters.http_client import APIClient
from core.config import AppSettings

BASE_URL = "https://platform.test"


@pytest.fixture
def settings() -> AppSettings:
    """Settings that ignore any .env file on the machine running the tests."""
    return AppSettings(
        _env_file=None,
        base_url=BASE_URL,
        api_token="test-token",
        app_base_url="https://app.platform.test",
    )


@pytest.fixture
async def http_client() -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient() as client:
        yield client


def last_json(route: Route) -> Any:
    return json.loads(route.calls.last.request.content)


async def wait_for_calls(route: Route, count: int, timeout: float = 2.0) -> None:
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while route.call_count < count:
        if loop.time() > deadline:
            raise AssertionError(f"expected {count} call(s), got {route.call_count}")
        await asyncio.sleep(0.005)


async def forward(
    respx_mock: MockRouter,
    facade: APIClient,
    method_name: str,
    args: tuple[Any, ...],
    verb: str,
    path: str,
) -> httpx.Request:
    """Call `method_name` on the façade and return the request it sent to `path`."""
    route = respx_mock.route(method=verb, url=facade.url_for(path)).mock(return_value=httpx.Response(204))
    await getattr(facade, method_name)(*args)
    assert route.call_count == 1
    return route.calls.last.request


def assert_query_and_body(request: httpx.Request, query: dict[str, str], body: Any) -> None:
    assert dict(request.url.params) == query
    if body is None:
        assert request.content == b""
    else:
        assert json.loads(request.content) == body
