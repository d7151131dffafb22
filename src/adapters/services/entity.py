"""Façade del entity-service: CRUD de entidades, vistas, ACL y papelera."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

import httpx

from adapters.http_client import APIClient
from core.config import AppSettings
from core.domain.api_mapping import ServiceName
from core.domain.entity import (
    DeleteEntitiesResponse,
    Operation,
    PrefixResponse,
    TrashedEntitiesResponse,
    TrashedEntitiesSchemaNameResponse,
)
from core.domain.models import ApiResponse

_JSON = {"Content-Type": "application/json"}
_V2 = {"x-ff-version": 2}


class EntityService(APIClient):
    def __init__(self, settings: AppSettings | None = None, client: httpx.AsyncClient | None = None) -> None:
        super().__init__(ServiceName.ENTITY, settings, client)

    async def create_entity(self, schema_id: str, entity: Mapping[str, Any] | None) -> ApiResponse:
        """Crea una entidad; `data` es el id de la entidad creada."""

        return await self.invoke_api(f"/schemas/{schema_id}", "POST", entity or {})

    async def create_entity_from_previous(
        self,
        schema_name: str,
        previous_schema_name: str,
        previous_entity_id: str,
    ) -> ApiResponse:
        """Crea una entidad copiando los campos homónimos de otra entidad.

        El schema nuevo puede diferir del schema de la entidad previa.
        """

        return await self.invoke_api(
            f"/schemas/{schema_name}/previous",
            "POST",
            params={
                "previousSchemaName": previous_schema_name,
                "previousEntityId": previous_entity_id,
            },
        )

    async def stringify_entity(
        self,
        schema_id: str,
        entity_id: str,
        view_id: str = "EntityRelationView",
    ) -> ApiResponse:
        """Deprecated: representación textual de una entidad según una vista."""

        return await self.invoke_api(f"/views/{view_id}/schemas/{schema_id}/entities/{entity_id}/stringify")

    async def stringify_entity_by_type(self, schema_name: str, entity_id: str) -> ApiResponse:
        """Deprecated: como `stringify_entity` pero resolviendo la vista por tipo."""

        return await self.invoke_api(f"/views/schemas/{schema_name}/entities/{entity_id}/stringify")

    async def search_entity(
        self,
        index: str,
        view_name: str,
        flowdsl: Mapping[str, Any] | None = None,
        page: int = 1,
        size: int = 20,
        with_count: bool | None = None,
    ) -> ApiResponse:
        return await self.invoke_api(
            f"/search/schemas/{index}",
            "POST",
            flowdsl,
            params={"page": page, "size": size, "viewName": view_name, "withCount": with_count},
            headers=_JSON,
        )

    async def fetch_entities_virtualized(
        self,
        index: str,
        view_name: str,
        flowdsl: Mapping[str, Any] | None = None,
        offset: int = 0,
        size: int = 20,
        with_count: bool | None = None,
    ) -> ApiResponse:
        """Busca entidades y las devuelve fusionadas con el schema y la vista."""

        return await self.invoke_api(
            f"/search/schemas/{index}",
            "POST",
            flowdsl,
            params={"offset": offset, "size": size, "viewName": view_name, "withCount": with_count},
        )

    async def fetch_entities_virtualized_v2(
        self,
        index: str,
        view_name: str,
        flowdsl: Mapping[str, Any] | None = None,
        offset: int = 0,
        size: int = 20,
        with_count: bool | None = None,
    ) -> ApiResponse:
        """Como `fetch_entities_virtualized`, pero fusionando solo con la vista."""

        return await self.invoke_api(
            f"/search/schemas/{index}",
            "POST",
            flowdsl,
            params={"offset": offset, "size": size, "viewName": view_name, "withCount": with_count},
            headers=_V2,
        )

    async def delete_entity(self, entity_id: str, schema_id: str) -> ApiResponse:
        return await self.invoke_api(f"/schemas/{schema_id}/entities/{entity_id}", "DELETE")

    async def delete_entities(self, entities: Sequence[Mapping[str, Any]]) -> ApiResponse:
        """Borra varias entidades de un schema (o grupo de schemas).

        La cabecera v2 es obligatoria: sin ella el backend interpreta el
        borrado sobre todo el sistema del cliente.
        """

        return await self.invoke_api_with_error_handling(
            "/entities",
            "DELETE",
            {"entities": list(entities)},
            headers=_V2,
            response_type=DeleteEntitiesResponse,
        )

    async def update_entity(self, schema_id: str, entity_id: str, fields: Mapping[str, Any]) -> ApiResponse:
        return await self.invoke_api(f"/schemas/{schema_id}/entities/{entity_id}", "PATCH", fields)

    async def update_entity_deep(
        self,
        schema_id: str,
        entity_id: str,
        fields: Mapping[str, Any],
        operation: Operation,
    ) -> ApiResponse:
        """Actualiza respetando la configuración de cada campo.

        Un campo simple con valor se sobrescribe; uno múltiple recibe el
        valor nuevo como elemento adicional.
        """

        return await self.invoke_api_with_error_handling(
            f"/schemas/{schema_id}/entities/{entity_id}/deep",
            "PATCH",
            {"op": Operation(operation).value, "value": fields},
        )

    async def fetch_entity_with_view_definition(self, view_id: str, schema_id: str, entity_id: str) -> ApiResponse:
        return await self.invoke_api(f"/views/{view_id}/schemas/{schema_id}/entities/{entity_id}", "GET")

    async def fetch_entity(self, schema_id: str, entity_id: str) -> ApiResponse:
        return await self.invoke_api(f"/schemas/{schema_id}/entities/{entity_id}", "GET")

    async def fetch_entity_descriptor(self, entity_id: str) -> ApiResponse:
        return await self.invoke_api(
            f"/entities/{entity_id}",
            "GET",
            headers={"Accept": "application/json+descriptor"},
        )

    async def fetch_history(self, schema_id: str, entity_id: str, page: int) -> ApiResponse:
        """Deprecated: usar el history-service."""

        return await self.invoke_api(
            f"/schemas/{schema_id}/entities/{entity_id}/history",
            "GET",
            params={"page": page, "size": 15, "order": "DESC"},
        )

    async def has_access_for_single_entity(
        self,
        schema_id: str,
        entity_id: str,
        user_id: str,
        access_type: str,
    ) -> ApiResponse:
        return await self.invoke_api(
            f"/schemas/{schema_id}/entities/{entity_id}/users/{user_id}/hasaccess/{access_type}",
            "GET",
        )

    async def has_access_for_multiple_entities(
        self,
        user_id: str,
        access_type: str,
        entities: Sequence[Mapping[str, Any]],
    ) -> ApiResponse:
        return await self.invoke_api(f"/users/{user_id}/hasaccess/{access_type}", "POST", list(entities))

    async def transform_entities_with_view(
        self,
        view_name: str,
        entity_queries: Sequence[Mapping[str, Any]],
    ) -> ApiResponse:
        """Convierte pares (schema, entityId) en entidades renderizadas con la vista."""

        return await self.invoke_api(f"/views/{view_name}/entities", "POST", list(entity_queries))

    async def duplicate_entity(
        self,
        schema_id: str,
        entity_id: str,
        target_schema: str | None = None,
    ) -> ApiResponse:
        """Duplica la entidad y sus ficheros; `data` es el id de la copia."""

        return await self.invoke_api_with_error_handling(
            f"/schemas/{schema_id}/entities/{entity_id}/duplicate",
            "POST",
            params={"targetSchema": target_schema},
        )

    async def fetch_entity_without_schema_id(self, entity_id: str) -> ApiResponse:
        return await self.invoke_api_with_error_handling(f"/entities/{entity_id}", "GET")

    async def fetch_prefixes(self) -> ApiResponse:
        return await self.invoke_api_with_error_handling("/prefixes", "GET", response_type=PrefixResponse)

    async def update_prefix(self, schema: str, prefix: str) -> ApiResponse:
        return await self.invoke_api_with_error_handling("/prefixes", "POST", {"schema": schema, "prefix": prefix})

    async def fetch_trashed_entities(
        self,
        page: int,
        size: int = 50,
        schema: str | None = None,
        return_ids: bool | None = None,
    ) -> ApiResponse:
        return await self.invoke_api_with_error_handling(
            "/recovery/entities",
            "GET",
            params={"page": page, "size": size, "schema": schema, "returnIds": return_ids},
            response_type=TrashedEntitiesResponse,
        )

    async def delete_trashed_entities(self, entity_ids: Sequence[str]) -> ApiResponse:
        return await self.invoke_api_with_error_handling(
            "/recovery/entities",
            "DELETE",
            {"entityIds": list(entity_ids)},
        )

    async def restore_trashed_entities(self, entity_ids: Sequence[str]) -> ApiResponse:
        return await self.invoke_api_with_error_handling(
            "/recovery/entities",
            "POST",
            {"entityIds": list(entity_ids)},
        )

    async def fetch_trashed_entity_schema_names(self) -> ApiResponse:
        return await self.invoke_api_with_error_handling(
            "/recovery/schemas",
            "GET",
            response_type=TrashedEntitiesSchemaNameResponse,
        )
