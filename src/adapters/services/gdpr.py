"""Façade del gdpr-service (consentimiento y bloqueo de contactos)."""

from __future__ import annotations

import httpx

from adapters.http_client import APIClient
from core.config import AppSettings
from core.domain.api_mapping import ServiceName
from core.domain.models import ApiResponse


class GDPRContactController(APIClient):
    def __init__(self, settings: AppSettings | None = None, client: httpx.AsyncClient | None = None) -> None:
        super().__init__(ServiceName.GDPR, settings, client)

    async def fetch_contacts_with_pending_consent(self, page: int = 1, size: int = 50) -> ApiResponse:
        return await self.invoke_api_with_error_handling(
            "/contacts",
            "GET",
            params={"status": "CONSENT_PENDING", "page": page, "size": size},
        )

    async def is_contact_blocked(self, contact_id: str) -> ApiResponse:
        return await self.invoke_api_with_error_handling(
            "/contact/blocked",
            "GET",
            params={"contactId": contact_id},
            response_type=bool,
        )

    async def block_contact(self, contact_id: str, block: bool) -> ApiResponse:
        """Bloquea (`block=True`) o desbloquea el contacto."""

        return await self.invoke_api_with_error_handling(
            "/contact/block",
            "POST",
            headers={"Content-Type": "application/json"},
            params={"block": block, "contactId": contact_id},
        )

    async def send_check_contact_details_mail(self, contact_id: str) -> ApiResponse:
        return await self.invoke_api_with_error_handling(f"/contacts/mail/{contact_id}", "POST")
