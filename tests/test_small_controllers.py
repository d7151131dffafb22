"""Unit tests for the single-purpose controllers."""

from __future__ import annotations

import json

import httpx
import pytest
from respx import MockRouter

from adapters.services import (
    BundleController,
    CompanyInternalController,
    EmailSendController,
    EntityShareAccessController,
    GDPRContactController,
    IS24RealEstateController,
    MailchimpController,
    OpenimmoReportRecipientsController,
    SlackIntegrationController,
    TemplateService,
)
from conftest import BASE_URL, assert_query_and_body, forward, last_json
from core.config import AppSettings


@pytest.mark.asyncio
async def test_company_fetch_group(settings: AppSettings, respx_mock: MockRouter) -> None:
    route = respx_mock.get(f"{BASE_URL}/company-service/internal/company/groups/north").mock(
        return_value=httpx.Response(200, json={"name": "north"})
    )
    trial = respx_mock.put(f"{BASE_URL}/company-service/internal/company/c-1/startTrial").mock(
        return_value=httpx.Response(204)
    )
    company = CompanyInternalController(settings)

    response = await company.fetch_group("north")
    await company.start_trial("c-1")

    assert route.called and trial.called
    assert response.data == {"name": "north"}


@pytest.mark.asyncio
async def test_send_mail_posts_model_as_multipart_field(settings: AppSettings, respx_mock: MockRouter) -> None:
    route = respx_mock.post(f"{BASE_URL}/email-service/mails/html").mock(return_value=httpx.Response(200))

    await EmailSendController(settings).send_mail({"subject": "Besichtigung", "recipients": ["c@example.com"]})

    request = route.calls.last.request
    assert request.headers["content-type"].startswith("multipart/form-data")
    assert b'name="model"' in request.content
    assert json.dumps({"subject": "Besichtigung", "recipients": ["c@example.com"]}).encode() in request.content


@pytest.mark.asyncio
async def test_send_mail_v2(settings: AppSettings, respx_mock: MockRouter) -> None:
    route = respx_mock.post(f"{BASE_URL}/email-service/emails/send/d-1").mock(return_value=httpx.Response(204))

    await EmailSendController(settings).send_mail_v2("d-1", send_search_profiles_link=True)

    request = route.calls.last.request
    assert request.headers["x-ff-version"] == "2"
    assert dict(request.url.params) == {"sendSearchProfilesLink": "true"}


@pytest.mark.asyncio
async def test_entity_share_access(settings: AppSettings, respx_mock: MockRouter) -> None:
    listing = respx_mock.get(f"{BASE_URL}/entity-share-service/access").mock(return_value=httpx.Response(200, json=[]))
    deactivate = respx_mock.post(f"{BASE_URL}/entity-share-service/access/deactivate").mock(
        return_value=httpx.Response(204)
    )
    share = EntityShareAccessController(settings)

    await share.fetch_imported_entities(page=1, size=25)
    await share.deactivate_access("c-2", "tok")

    assert dict(listing.calls.last.request.url.params) == {"page": "1", "size": "25"}
    assert last_json(deactivate) == {"companyId": "c-2", "token": "tok"}


@pytest.mark.asyncio
async def test_gdpr_block_state(settings: AppSettings, respx_mock: MockRouter) -> None:
    blocked = respx_mock.get(f"{BASE_URL}/gdpr-service/contact/blocked").mock(
        return_value=httpx.Response(200, json=True)
    )
    block = respx_mock.post(f"{BASE_URL}/gdpr-service/contact/block").mock(return_value=httpx.Response(204))
    gdpr = GDPRContactController(settings)

    response = await gdpr.is_contact_blocked("c-1")
    await gdpr.block_contact("c-1", False)

    assert response.data is True
    assert dict(blocked.calls.last.request.url.params) == {"contactId": "c-1"}
    assert dict(block.calls.last.request.url.params) == {"block": "false", "contactId": "c-1"}


@pytest.mark.asyncio
async def test_gdpr_pending_consent_query(settings: AppSettings, respx_mock: MockRouter) -> None:
    route = respx_mock.get(f"{BASE_URL}/gdpr-service/contacts").mock(return_value=httpx.Response(200, json=[]))

    await GDPRContactController(settings).fetch_contacts_with_pending_consent()

    assert dict(route.calls.last.request.url.params) == {"status": "CONSENT_PENDING", "page": "1", "size": "50"}


@pytest.mark.asyncio
async def test_is24_delete_estate(settings: AppSettings, respx_mock: MockRouter) -> None:
    route = respx_mock.delete(f"{BASE_URL}/is24-publish-service/portal/p-1/estate/e-1").mock(
        return_value=httpx.Response(404, json={"message": "Estate not published"})
    )

    response = await IS24RealEstateController(settings).delete_estate("p-1", "e-1")

    assert route.called
    assert response.error is not None
    assert response.error.status_code == 404


@pytest.mark.asyncio
async def test_mailchimp_defaults_callback_url(settings: AppSettings, respx_mock: MockRouter) -> None:
    save = respx_mock.post(f"{BASE_URL}/mailchimp-sync-integration-service/settings").mock(
        return_value=httpx.Response(200, json={})
    )
    update = respx_mock.put(f"{BASE_URL}/mailchimp-sync-integration-service/settings").mock(
        return_value=httpx.Response(200, json={})
    )
    mailchimp = MailchimpController(settings)

    await mailchimp.save_settings({"listId": "l-1"})
    await mailchimp.update_settings({"listId": "l-1", "callbackUrl": "https://hooks.example.com"})

    assert last_json(save) == {"listId": "l-1", "callbackUrl": "https://app.platform.test"}
    assert last_json(update)["callbackUrl"] == "https://hooks.example.com"


def test_mailchimp_callback_falls_back_to_gateway() -> None:
    settings = AppSettings(_env_file=None, base_url="https://gateway.test")
    assert MailchimpController(settings)._with_callback({})["callbackUrl"] == "https://gateway.test"


@pytest.mark.asyncio
async def test_openimmo_update_recipients(settings: AppSettings, respx_mock: MockRouter) -> None:
    route = respx_mock.put(f"{BASE_URL}/openimmo-ftp-access-service/report").mock(return_value=httpx.Response(204))

    await OpenimmoReportRecipientsController(settings).update_report_recipients([{"email": "ops@example.com"}])

    assert last_json(route) == {"recipients": [{"email": "ops@example.com"}]}


@pytest.mark.asyncio
async def test_sample_data_bundles(settings: AppSettings, respx_mock: MockRouter) -> None:
    bundles = respx_mock.get(f"{BASE_URL}/sample-data-service/bundles").mock(return_value=httpx.Response(200, json=[]))
    bundle = respx_mock.get(f"{BASE_URL}/sample-data-service/bundles/starter").mock(
        return_value=httpx.Response(200, json={"name": "starter"})
    )
    controller = BundleController(settings)

    await controller.fetch_bundles()
    await controller.fetch_bundle("starter", scope="CUSTOM")

    assert dict(bundles.calls.last.request.url.params) == {"scope": "FLOWFACT"}
    assert dict(bundle.calls.last.request.url.params) == {"scope": "CUSTOM"}


@pytest.mark.asyncio
async def test_slack_listing(settings: AppSettings, respx_mock: MockRouter) -> None:
    respx_mock.get(f"{BASE_URL}/slack-integration-service/channels").mock(
        return_value=httpx.Response(200, json=[{"id": "C1"}])
    )

    response = await SlackIntegrationController(settings).fetch_channels()

    assert response.data == [{"id": "C1"}]


@pytest.mark.asyncio
async def test_template_service_returns_data(settings: AppSettings, respx_mock: MockRouter) -> None:
    url = f"{BASE_URL}/template-service/templates"
    listing = respx_mock.get(url).mock(return_value=httpx.Response(200))
    respx_mock.post(url).mock(return_value=httpx.Response(201, json={"id": "t-1"}))
    templates = TemplateService(settings)

    assert await templates.get_all_templates() == []
    assert await templates.get_templates_by_type("EMAIL") == []
    assert dict(listing.calls.last.request.url.params) == {"templateType": "EMAIL"}
    assert await templates.create_template({"name": "Welcome"}) == {"id": "t-1"}


@pytest.mark.asyncio
async def test_template_upload_content(settings: AppSettings, respx_mock: MockRouter) -> None:
    route = respx_mock.post(f"{BASE_URL}/template-service/templates/t-1/content").mock(
        return_value=httpx.Response(204)
    )

    response = await TemplateService(settings).upload_content("t-1", b"<html></html>", "welcome.html")

    assert response.status_code == 204
    assert b'filename="welcome.html"' in route.calls.last.request.content


@pytest.mark.asyncio
async def test_template_errors_propagate(settings: AppSettings, respx_mock: MockRouter) -> None:
    respx_mock.get(f"{BASE_URL}/template-service/templates/missing").mock(return_value=httpx.Response(404))

    with pytest.raises(httpx.HTTPStatusError):
        await TemplateService(settings).get_template_by_id("missing")


@pytest.mark.parametrize(
    ("controller", "method_name", "args", "verb", "path", "query", "body"),
    [
        (CompanyInternalController, "fetch_company_by_id", ("c-1",), "GET", "/internal/company/c-1", {}, None),
        (CompanyInternalController, "start_trial", ("c-1",), "PUT", "/internal/company/c-1/startTrial", {}, None),
        (CompanyInternalController, "end_trial", ("c-1",), "PUT", "/internal/company/c-1/endTrial", {}, None),
        (CompanyInternalController, "fetch_group", ("north",), "GET", "/internal/company/groups/north", {}, None),
        (
            EmailSendController,
            "send_mail_v2",
            ("d-1",),
            "POST",
            "/emails/send/d-1",
            {"sendSearchProfilesLink": "false"},
            None,
        ),
        (EntityShareAccessController, "fetch_imported_entities", (), "GET", "/access", {"page": "0", "size": "10"}, None),
        (EntityShareAccessController, "fetch_companies_with_access", ("tok",), "GET", "/access/tok", {}, None),
        (EntityShareAccessController, "import_entity", ("tok",), "POST", "/access", {}, {"token": "tok"}),
        (
            EntityShareAccessController,
            "deactivate_access",
            ("c-2", "tok"),
            "POST",
            "/access/deactivate",
            {},
            {"companyId": "c-2", "token": "tok"},
        ),
        (
            EntityShareAccessController,
            "reactivate_access",
            ("c-2", "tok"),
            "POST",
            "/access/reactivate",
            {},
            {"companyId": "c-2", "token": "tok"},
        ),
        (
            GDPRContactController,
            "fetch_contacts_with_pending_consent",
            (2, 10),
            "GET",
            "/contacts",
            {"status": "CONSENT_PENDING", "page": "2", "size": "10"},
            None,
        ),
        (GDPRContactController, "is_contact_blocked", ("c-1",), "GET", "/contact/blocked", {"contactId": "c-1"}, None),
        (
            GDPRContactController,
            "block_contact",
            ("c-1", True),
            "POST",
            "/contact/block",
            {"block": "true", "contactId": "c-1"},
            None,
        ),
        (GDPRContactController, "send_check_contact_details_mail", ("c-1",), "POST", "/contacts/mail/c-1", {}, None),
        (IS24RealEstateController, "delete_estate", ("p-1", "e-1"), "DELETE", "/portal/p-1/estate/e-1", {}, None),
        (MailchimpController, "fetch_credentials", (), "GET", "/credentials", {}, None),
        (MailchimpController, "save_credentials", ("tok",), "POST", "/credentials", {}, {"token": "tok"}),
        (MailchimpController, "delete_credentials", (), "DELETE", "/credentials", {}, None),
        (MailchimpController, "fetch_mailchimp_lists", (), "GET", "/mailchimp/lists", {"page": "0", "size": "20"}, None),
        (MailchimpController, "fetch_settings", (), "GET", "/settings", {}, None),
        (
            MailchimpController,
            "save_settings",
            ({"listId": "l-1", "callbackUrl": "https://hooks.example.com"},),
            "POST",
            "/settings",
            {},
            {"listId": "l-1", "callbackUrl": "https://hooks.example.com"},
        ),
        (
            MailchimpController,
            "update_settings",
            ({"listId": "l-2", "callbackUrl": "https://hooks.example.com"},),
            "PUT",
            "/settings",
            {},
            {"listId": "l-2", "callbackUrl": "https://hooks.example.com"},
        ),
        (MailchimpController, "delete_settings", (), "DELETE", "/settings", {}, None),
        (MailchimpController, "synchronize_contacts", (), "POST", "/publish", {}, None),
        (
            MailchimpController,
            "synchronize_selected_contacts",
            ({"contactIds": ["c-1"], "groupId": "g-1"},),
            "POST",
            "/publish/contacts",
            {},
            {"contactIds": ["c-1"], "groupId": "g-1"},
        ),
        (MailchimpController, "check_sync_status", (), "GET", "/syncStatus", {}, None),
        (OpenimmoReportRecipientsController, "fetch_all", (), "GET", "/report", {}, None),
        (
            OpenimmoReportRecipientsController,
            "update_report_recipients",
            ([{"email": "ops@example.com"}],),
            "PUT",
            "/report",
            {},
            {"recipients": [{"email": "ops@example.com"}]},
        ),
        (
            BundleController,
            "fetch_bundles",
            ("CUSTOM", True),
            "GET",
            "/bundles",
            {"scope": "CUSTOM", "onlySelectableByCustomer": "true"},
            None,
        ),
        (BundleController, "fetch_bundle", ("starter",), "GET", "/bundles/starter", {"scope": "FLOWFACT"}, None),
        (SlackIntegrationController, "fetch_channels", (), "GET", "/channels", {}, None),
        (SlackIntegrationController, "fetch_users", (), "GET", "/users", {}, None),
        (TemplateService, "get_all_templates", (), "GET", "/templates", {}, None),
        (TemplateService, "get_templates_by_type", ("EMAIL",), "GET", "/templates", {"templateType": "EMAIL"}, None),
        (TemplateService, "create_template", ({"name": "Welcome"},), "POST", "/templates", {}, {"name": "Welcome"}),
        (TemplateService, "get_template_by_id", ("t-1",), "GET", "/templates/t-1", {}, None),
        (TemplateService, "delete", ("t-1",), "DELETE", "/templates/t-1", {}, None),
        (TemplateService, "update_template", ({"name": "Hello"}, "t-1"), "PUT", "/templates/t-1", {}, {"name": "Hello"}),
    ],
)
@pytest.mark.asyncio
async def test_controller_forwarding(
    settings: AppSettings,
    respx_mock: MockRouter,
    controller: type,
    method_name: str,
    args: tuple,
    verb: str,
    path: str,
    query: dict,
    body: object,
) -> None:
    request = await forward(respx_mock, controller(settings), method_name, args, verb, path)
    assert_query_and_body(request, query, body)
