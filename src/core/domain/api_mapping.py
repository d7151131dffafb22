"""Tabla de base paths de los servicios backend.

Cada façade queda ligada a un único `ServiceName`; el path final es
`settings.base_url + base_path + path del método`.
"""

from __future__ import annotations

from enum import Enum

from core.config import AppSettings


class ServiceName(str, Enum):
    """Servicios backend expuestos por el gateway de la plataforma."""

    BEHAVIOUR = "behaviour-service"
    COMPANY = "company-service"
    EMAIL = "email-service"
    ENTITY = "entity-service"
    ENTITY_SHARE = "entity-share-service"
    FULL_TEXT_SEARCH = "fulltext-search-service"
    GDPR = "gdpr-service"
    INQUIRY = "inquiry-service"
    IS24_PUBLISH = "is24-publish-service"
    MAILCHIMP = "mailchimp-sync-integration-service"
    NYLAS = "nylas-service"
    OPENIMMO_FTP_ACCESS = "openimmo-ftp-access-service"
    PORTAL_MANAGEMENT = "portal-management-service"
    SAMPLE_DATA = "sample-data-service"
    SEARCH = "search-service"
    SLACK_INTEGRATION = "slack-integration-service"
    TEMPLATE = "template-service"

    @property
    def default_base_path(self) -> str:
        return f"/{self.value}"


def resolve_base_path(service: ServiceName, settings: AppSettings | None = None) -> str:
    """Devuelve el base path del servicio aplicando overrides de configuración.

    Los overrides se normalizan a un único `/` inicial y sin `/` final.
    """

    settings = settings or AppSettings()
    override = settings.service_paths.get(service.value)
    if override is None:
        return service.default_base_path
    path = "/" + override.strip().strip("/")
    return "" if path == "/" else path


def resolve_service_url(service: ServiceName, settings: AppSettings | None = None) -> str:
    settings = settings or AppSettings()
    return settings.base_url.rstrip("/") + resolve_base_path(service, settings)
