"""Façade del search-service y construcción de consultas flowdsl.

`build_query` genera el documento flowdsl para el filtro rápido de listas:
- `target=ENTITY`, `distinct=false`.
- Si hay valor, una condición `OR` por campo (`ENTITYID` para `id`,
  `HASFIELDWITHVALUE ... LIKE` para el resto).
- `fetch` con los campos si `limitResponse` está activo.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

import httpx

from adapters.http_client import APIClient
from core.config import AppSettings
from core.domain.api_mapping import ServiceName
from core.domain.models import ApiResponse

_JSON = {"Content-Type": "application/json"}


def build_query_params(page: int | None = 1, size: int | None = None, with_count: bool | None = None) -> dict[str, Any]:
    params: dict[str, Any] = {}
    if page:
        params["page"] = page
    if size:
        params["size"] = size
    if isinstance(with_count, bool):
        params["withCount"] = with_count
    return params


def build_query(filter_configuration: Mapping[str, Any] | None, sorting: Any = None) -> dict[str, Any]:
    query: dict[str, Any] = {"target": "ENTITY", "distinct": False}

    if filter_configuration:
        fields: Sequence[str] = filter_configuration.get("fields") or []
        value = filter_configuration.get("value")
        if value is not None and value != "":
            conditions: list[dict[str, Any]] = []
            for field in fields:
                if field == "id":
                    conditions.append({"type": "ENTITYID", "values": [value]})
                else:
                    conditions.append(
                        {
                            "type": "HASFIELDWITHVALUE",
                            "field": field,
                            "value": value,
                            "operator": "LIKE",
                        }
                    )
            query["conditions"] = [{"type": "OR", "conditions": conditions}]

        if filter_configuration.get("limitResponse"):
            query["fetch"] = list(fields)

    # flowdsl todavía no soporta ordenación: `sorting` se acepta y se ignora.
    return query


class SearchService(APIClient):
    def __init__(self, settings: AppSettings | None = None, client: httpx.AsyncClient | None = None) -> None:
        super().__init__(ServiceName.SEARCH, settings, client)

    async def fetch_searches(self) -> ApiResponse:
        """Todas las búsquedas guardadas en forma corta (id + nombre)."""

        return await self.invoke_api("/search", "GET")

    async def fetch_search(self, search_id: str) -> ApiResponse:
        return await self.invoke_api(f"/search/{search_id}", "GET")

    async def save_search(self, search_model: Mapping[str, Any]) -> ApiResponse:
        return await self.invoke_api("/search", "POST", search_model)

    async def delete_search(self, search_id: str) -> ApiResponse:
        return await self.invoke_api(f"/search/{search_id}", "DELETE")

    async def update_search(self, search_id: str, search_model: Mapping[str, Any]) -> ApiResponse:
        return await self.invoke_api(f"/search/{search_id}", "PUT", search_model)

    async def search(
        self,
        query: Mapping[str, Any],
        index: str,
        page: int = 1,
        size: int | None = None,
        with_count: bool | None = None,
    ) -> ApiResponse:
        """Busca entidades o tags en el índice `index`."""

        return await self.invoke_api(
            f"/schemas/{index}",
            "POST",
            query,
            params=build_query_params(page, size, with_count),
            headers=_JSON,
        )

    async def search_saved_searches(
        self,
        query: Mapping[str, Any],
        page: int = 1,
        size: int | None = None,
        with_count: bool | None = None,
    ) -> ApiResponse:
        return await self.invoke_api(
            "/saved-searches",
            "POST",
            query,
            params=build_query_params(page, size, with_count),
            headers=_JSON,
        )

    async def search_virtualized(
        self,
        query: Mapping[str, Any],
        index: str,
        offset: int = 0,
        size: int = 20,
        with_count: bool = True,
    ) -> ApiResponse:
        return await self.invoke_api_with_error_handling(
            f"/schemas/{index}",
            "POST",
            query,
            params={"offset": offset, "size": size, "withCount": with_count},
        )

    async def count(self, query: Mapping[str, Any], index: str, group_by: str | None = None) -> ApiResponse:
        return await self.invoke_api(
            f"/schemas/{index}/count",
            "POST",
            query,
            params={"groupBy": group_by},
            headers=_JSON,
        )

    async def group_by(
        self,
        query: Mapping[str, Any],
        index: str,
        group_by: Sequence[str],
        treating_blank_string_values_as_null: bool = True,
    ) -> ApiResponse:
        """Cuenta por grupos; con el flag, `null` y `""` cuentan como el mismo valor."""

        return await self.invoke_api_with_error_handling(
            f"/schemas/{index}/count",
            "POST",
            query,
            params={
                "groupBy": ",".join(group_by),
                "treatingBlankStringValuesAsNull": treating_blank_string_values_as_null,
            },
            headers={**_JSON, "x-ff-version": 2},
        )

    async def internal_count(
        self,
        company_id: str,
        query: Mapping[str, Any],
        index: str,
        with_acl_groups: bool = False,
    ) -> ApiResponse:
        return await self.invoke_api(
            f"/internal/schemas/{index}/count",
            "POST",
            query,
            params={"companyId": company_id, "withAclGroups": str(with_acl_groups).lower()},
            headers=_JSON,
        )

    async def filter(
        self,
        index: str,
        page: int = 1,
        size: int = 30,
        filter_configuration: Mapping[str, Any] | None = None,
        sorting: Any = None,
    ) -> ApiResponse:
        return await self.invoke_api(
            f"/schemas/{index}",
            "POST",
            build_query(filter_configuration, sorting),
            params=build_query_params(page, size),
            headers=_JSON,
        )
