"""Service registry.

Bundles one instance of every backend façade so entry-points (CLI, app
code, tests) share the same settings and, optionally, the same pooled
`httpx.AsyncClient`. `get_services()` is the process-wide singleton used
where the façades would otherwise be module-level instances.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from functools import lru_cache
from typing import Iterator

import httpx

from adapters.http_client import APIClient
from adapters.services import (
    BehaviourService,
    BundleController,
    CompanyInternalController,
    EmailSendController,
    EntityService,
    EntityShareAccessController,
    FullTextSearchService,
    GDPRContactController,
    InquiryService,
    IS24RealEstateController,
    MailchimpController,
    NylasService,
    OpenimmoReportRecipientsController,
    PortalController,
    SearchService,
    SlackIntegrationController,
    TemplateService,
)
from core.config import AppSettings


@dataclass
class PlatformServices:
    """All service façades bound to one configuration."""

    settings: AppSettings = field(default_factory=AppSettings)
    client: httpx.AsyncClient | None = None

    behaviour: BehaviourService = field(init=False)
    company: CompanyInternalController = field(init=False)
    email: EmailSendController = field(init=False)
    entity: EntityService = field(init=False)
    entity_share: EntityShareAccessController = field(init=False)
    full_text_search: FullTextSearchService = field(init=False)
    gdpr: GDPRContactController = field(init=False)
    inquiry: InquiryService = field(init=False)
    is24_publish: IS24RealEstateController = field(init=False)
    mailchimp: MailchimpController = field(init=False)
    nylas: NylasService = field(init=False)
    openimmo: OpenimmoReportRecipientsController = field(init=False)
    portal: PortalController = field(init=False)
    sample_data: BundleController = field(init=False)
    search: SearchService = field(init=False)
    slack: SlackIntegrationController = field(init=False)
    template: TemplateService = field(init=False)

    def __post_init__(self) -> None:
        s, c = self.settings, self.client
        self.behaviour = BehaviourService(s, c)
        self.company = CompanyInternalController(s, c)
        self.email = EmailSendController(s, c)
        self.entity = EntityService(s, c)
        self.entity_share = EntityShareAccessController(s, c)
        self.full_text_search = FullTextSearchService(s, c)
        self.gdpr = GDPRContactController(s, c)
        self.inquiry = InquiryService(s, c)
        self.is24_publish = IS24RealEstateController(s, c)
        self.mailchimp = MailchimpController(s, c)
        self.nylas = NylasService(s, c)
        self.openimmo = OpenimmoReportRecipientsController(s, c)
        self.portal = PortalController(s, c)
        self.sample_data = BundleController(s, c)
        self.search = SearchService(s, c)
        self.slack = SlackIntegrationController(s, c)
        self.template = TemplateService(s, c)

    def __iter__(self) -> Iterator[APIClient]:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, APIClient):
                yield value

    async def aclose(self) -> None:
        """Drain pending tracking events. The shared client stays open (caller-owned)."""

        await self.behaviour.aclose()


@lru_cache(maxsize=1)
def get_services() -> PlatformServices:
    """Return the process-wide registry built from environment settings."""

    return PlatformServices()
