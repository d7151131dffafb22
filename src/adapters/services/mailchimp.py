"""Façade del mailchimp-sync-integration-service.

Las settings se envían siempre con `callbackUrl`: si el llamador no lo
define se usa la URL pública de la aplicación (`AppSettings.callback_base_url`).
"""

from __future__ import annotations

from typing import Any, Mapping

import httpx

from adapters.http_client import APIClient
from core.config import AppSettings
from core.domain.api_mapping import ServiceName
from core.domain.models import ApiResponse


class MailchimpController(APIClient):
    def __init__(self, settings: AppSettings | None = None, client: httpx.AsyncClient | None = None) -> None:
        super().__init__(ServiceName.MAILCHIMP, settings, client)

    def _with_callback(self, settings: Mapping[str, Any]) -> dict[str, Any]:
        payload = dict(settings)
        if payload.get("callbackUrl") is None:
            payload["callbackUrl"] = self.settings.callback_base_url()
        return payload

    async def fetch_credentials(self) -> ApiResponse:
        """Credenciales de la API de Mailchimp de la empresa del usuario."""

        return await self.invoke_api_with_error_handling("/credentials", "GET")

    async def save_credentials(self, token: str) -> ApiResponse:
        return await self.invoke_api_with_error_handling("/credentials", "POST", {"token": token})

    async def delete_credentials(self) -> ApiResponse:
        return await self.invoke_api_with_error_handling("/credentials", "DELETE")

    async def fetch_mailchimp_lists(self, page: int = 0, size: int = 20) -> ApiResponse:
        """Listas (audiences) de Mailchimp de la empresa, paginadas."""

        return await self.invoke_api_with_error_handling(
            "/mailchimp/lists",
            "GET",
            params={"page": page, "size": size},
        )

    async def fetch_settings(self) -> ApiResponse:
        return await self.invoke_api_with_error_handling("/settings", "GET")

    async def save_settings(self, settings: Mapping[str, Any]) -> ApiResponse:
        return await self.invoke_api_with_error_handling("/settings", "POST", self._with_callback(settings))

    async def update_settings(self, settings: Mapping[str, Any]) -> ApiResponse:
        return await self.invoke_api_with_error_handling("/settings", "PUT", self._with_callback(settings))

    async def delete_settings(self) -> ApiResponse:
        return await self.invoke_api_with_error_handling("/settings", "DELETE")

    async def synchronize_contacts(self) -> ApiResponse:
        return await self.invoke_api_with_error_handling("/publish", "POST")

    async def synchronize_selected_contacts(self, contact_resource: Mapping[str, Any]) -> ApiResponse:
        """Sincroniza los contactos dados y los asigna al subgrupo indicado."""

        return await self.invoke_api_with_error_handling("/publish/contacts", "POST", contact_resource)

    async def check_sync_status(self) -> ApiResponse:
        """Estado de la sincronización manual."""

        return await self.invoke_api_with_error_handling("/syncStatus", "GET")
