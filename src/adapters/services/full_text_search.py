"""Façade del fulltext-search-service."""

from __future__ import annotations

from typing import Any, Mapping

import httpx

from adapters.http_client import APIClient
from core.config import AppSettings
from core.domain.api_mapping import ServiceName
from core.domain.models import ApiResponse


class FullTextSearchService(APIClient):
    def __init__(self, settings: AppSettings | None = None, client: httpx.AsyncClient | None = None) -> None:
        super().__init__(ServiceName.FULL_TEXT_SEARCH, settings, client)

    async def search(
        self,
        schema_name: str,
        search_term: str,
        page: int = 1,
        size: int | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> ApiResponse:
        """Búsqueda de texto libre en un schema.

        `params` se añade a la query y puede sobrescribir page/size/searchTerm.
        """

        return await self.invoke_api(
            f"/search/{schema_name}",
            "GET",
            params={"page": page, "size": size, "searchTerm": search_term, **(params or {})},
            headers={"Content-Type": "application/json"},
        )
