"""Tipos propios del entity-service (papelera, prefijos, borrado masivo)."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Operation(str, Enum):
    """Operación para `update_entity_deep`."""

    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"


class DeleteEntityResult(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    response: Any = None
    status_code: int = Field(..., alias="statusCode")


class DeleteEntitiesResponse(BaseModel):
    """Resultado por entityId de un borrado masivo."""

    model_config = ConfigDict(extra="ignore")

    responses: dict[str, DeleteEntityResult] = Field(default_factory=dict)


class PrefixData(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    prefix: str
    schema_name: str = Field(..., alias="schema")
    default_for_schemas: list[str] | None = Field(default=None, alias="defaultForSchemas")


class PrefixResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    prefixes: list[PrefixData] = Field(default_factory=list)


class TrashedEntity(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    content: dict[str, Any] = Field(default_factory=dict)
    schema_name: str = Field(..., alias="schemaName")
    entity_id: str = Field(..., alias="entityId")
    deleted_at: int = Field(..., alias="deletedAt")
    deleted_by: str = Field(..., alias="deletedBy")


class TrashedEntitiesResponse(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    entries: list[TrashedEntity] = Field(default_factory=list)
    total_count: int = Field(default=0, alias="totalCount")
    page: int = 1
    page_size: int = Field(default=0, alias="pageSize")
    offset: int = 0
    size: int = 0


class TrashedEntitySchemaName(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    schema_name: str = Field(..., alias="schema")


class TrashedEntitiesSchemaNameResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    schemas: list[TrashedEntitySchemaName] = Field(default_factory=list)
