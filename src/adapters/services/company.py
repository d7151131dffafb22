"""Façade interna del company-service."""

from __future__ import annotations

import httpx

from adapters.http_client import APIClient
from core.config import AppSettings
from core.domain.api_mapping import ServiceName
from core.domain.models import ApiResponse


class CompanyInternalController(APIClient):
    def __init__(self, settings: AppSettings | None = None, client: httpx.AsyncClient | None = None) -> None:
        super().__init__(ServiceName.COMPANY, settings, client)

    async def fetch_company_by_id(self, company_id: str) -> ApiResponse:
        return await self.invoke_api_with_error_handling(f"/internal/company/{company_id}", "GET")

    async def start_trial(self, company_id: str) -> ApiResponse:
        """Deprecated."""

        return await self.invoke_api_with_error_handling(f"/internal/company/{company_id}/startTrial", "PUT")

    async def end_trial(self, company_id: str) -> ApiResponse:
        """Deprecated."""

        return await self.invoke_api_with_error_handling(f"/internal/company/{company_id}/endTrial", "PUT")

    async def fetch_group(self, name: str) -> ApiResponse:
        """Deprecated: detalle de un grupo de empresas."""

        return await self.invoke_api_with_error_handling(f"/internal/company/groups/{name}")
