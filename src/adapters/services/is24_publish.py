"""Façade del is24-publish-service."""

from __future__ import annotations

import httpx

from adapters.http_client import APIClient
from core.config import AppSettings
from core.domain.api_mapping import ServiceName
from core.domain.models import ApiResponse


class IS24RealEstateController(APIClient):
    def __init__(self, settings: AppSettings | None = None, client: httpx.AsyncClient | None = None) -> None:
        super().__init__(ServiceName.IS24_PUBLISH, settings, client)

    async def delete_estate(self, portal_id: str, estate_id: str) -> ApiResponse:
        """Borrado definitivo del inmueble en el sistema de IS24 (por portal e id interno)."""

        return await self.invoke_api_with_error_handling(f"/portal/{portal_id}/estate/{estate_id}", "DELETE")
