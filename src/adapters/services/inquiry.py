"""Façade del inquiry-service.

Gestiona consultas recibidas desde portales, su automatización por empresa
y el reprocesado manual de emails.
"""

from __future__ import annotations

from typing import Any, Mapping

import httpx

from adapters.http_client import APIClient
from core.config import AppSettings
from core.domain.api_mapping import ServiceName
from core.domain.inquiry import EmailVerificationResult, Inquiry, InquiryAutomation, PreconditionResponse
from core.domain.models import ApiResponse


class InquiryService(APIClient):
    def __init__(self, settings: AppSettings | None = None, client: httpx.AsyncClient | None = None) -> None:
        super().__init__(ServiceName.INQUIRY, settings, client)

    async def fetch_all(self, page: int = 1, size: int = 100) -> ApiResponse:
        """Todas las consultas, paginadas (`page` desplaza el resultado en `size`)."""

        return await self.invoke_api_with_error_handling(
            "/inquiry",
            "GET",
            params={"page": page, "size": size},
            response_type=list[Inquiry],
        )

    async def fetch_with_flowdsl(self, flowdsl: Mapping[str, Any], page: int = 1, size: int = 100) -> ApiResponse:
        return await self.invoke_api_with_error_handling(
            "/inquiry",
            "POST",
            flowdsl,
            params={"page": page, "size": size},
            response_type=list[Inquiry],
        )

    async def link_estate_and_start_automation(self, inquiry_id: str, estate_id: str) -> ApiResponse:
        """Vincula un inmueble a una consulta que aún no tiene ninguno.

        Devuelve la consulta actualizada.
        """

        return await self.invoke_api(
            f"/inquiry/{inquiry_id}/setEstate/{estate_id}",
            "POST",
            response_type=Inquiry,
        )

    async def get_inquiry_automation(self, company_id: str) -> ApiResponse:
        return await self.invoke_api_with_error_handling(
            f"/inquiry/automation/{company_id}",
            "GET",
            response_type=InquiryAutomation,
        )

    async def toggle_automation(self, company_id: str) -> ApiResponse:
        return await self.invoke_api_with_error_handling(
            f"/inquiry/automation/{company_id}",
            "POST",
            response_type=InquiryAutomation,
        )

    async def update_automation(self, company_id: str, settings: InquiryAutomation | Mapping[str, Any]) -> ApiResponse:
        return await self.invoke_api_with_error_handling(
            f"/inquiry/automation/{company_id}",
            "PUT",
            settings,
            response_type=InquiryAutomation,
        )

    async def replay_email(self, entity_id: str) -> ApiResponse:
        """Relanza manualmente el procesado de consulta para un email."""

        return await self.invoke_api_with_error_handling(f"/email/{entity_id}/replay", "POST")

    async def process_email(self, entity_id: str) -> ApiResponse:
        return await self.invoke_api_with_error_handling(f"/email/{entity_id}/process", "POST")

    async def validate_email(self, entity_id: str) -> ApiResponse:
        """Comprueba si el email es una consulta procesable o ya procesada."""

        return await self.invoke_api_with_error_handling(
            f"/email/{entity_id}/verify",
            "GET",
            response_type=EmailVerificationResult,
        )

    async def check_contact_api_availability(self) -> ApiResponse:
        return await self.invoke_api_with_error_handling(
            "/preconditions/authenticatedIs24Portal",
            "GET",
            response_type=PreconditionResponse,
        )
