"""Façade del sample-data-service (bundles de datos de ejemplo)."""

from __future__ import annotations

from typing import Literal

import httpx

from adapters.http_client import APIClient
from core.config import AppSettings
from core.domain.api_mapping import ServiceName
from core.domain.models import ApiResponse

BundleScope = Literal["FLOWFACT", "CUSTOM"]


class BundleController(APIClient):
    def __init__(self, settings: AppSettings | None = None, client: httpx.AsyncClient | None = None) -> None:
        super().__init__(ServiceName.SAMPLE_DATA, settings, client)

    async def fetch_bundles(
        self,
        scope: BundleScope = "FLOWFACT",
        only_selectable_by_customer: bool | None = None,
    ) -> ApiResponse:
        """Bundles del scope; sin `only_selectable_by_customer` se devuelven todos."""

        return await self.invoke_api_with_error_handling(
            "/bundles",
            "GET",
            params={"scope": scope, "onlySelectableByCustomer": only_selectable_by_customer},
        )

    async def fetch_bundle(self, bundle_name: str, scope: BundleScope = "FLOWFACT") -> ApiResponse:
        return await self.invoke_api_with_error_handling(
            f"/bundles/{bundle_name}",
            "GET",
            params={"scope": scope},
        )
