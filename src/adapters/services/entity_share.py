"""Façade del entity-share-service (entidades compartidas entre empresas por token)."""

from __future__ import annotations

import httpx

from adapters.http_client import APIClient
from core.config import AppSettings
from core.domain.api_mapping import ServiceName
from core.domain.models import ApiResponse


class EntityShareAccessController(APIClient):
    def __init__(self, settings: AppSettings | None = None, client: httpx.AsyncClient | None = None) -> None:
        super().__init__(ServiceName.ENTITY_SHARE, settings, client)

    async def fetch_imported_entities(self, page: int = 0, size: int = 10) -> ApiResponse:
        """Entidades importadas por la empresa del usuario actual."""

        return await self.invoke_api_with_error_handling("/access", "GET", params={"page": page, "size": size})

    async def fetch_companies_with_access(self, token: str) -> ApiResponse:
        """Empresas con acceso concedido a la entidad del token."""

        return await self.invoke_api_with_error_handling(f"/access/{token}", "GET")

    async def import_entity(self, token: str) -> ApiResponse:
        return await self.invoke_api_with_error_handling("/access", "POST", {"token": token})

    async def deactivate_access(self, company_id: str, token: str) -> ApiResponse:
        """Revoca el acceso de `company_id` a la entidad."""

        return await self.invoke_api_with_error_handling(
            "/access/deactivate",
            "POST",
            {"companyId": company_id, "token": token},
        )

    async def reactivate_access(self, company_id: str, token: str) -> ApiResponse:
        return await self.invoke_api_with_error_handling(
            "/access/reactivate",
            "POST",
            {"companyId": company_id, "token": token},
        )
