"""Documento de navegación del layout dinámico.

`captions` es un mapa idioma -> texto (p.ej. {"de": "Kontakte"}).
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class ACP(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    grant_type: Literal["template", "group"] = Field(..., alias="grantType")


class Access(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acps: list[ACP] | None = None
    hide_from_crm: bool | None = Field(default=None, alias="hideFromCrm")


class BaseItem(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str
    access: Access | None = None
    captions: dict[str, str] = Field(default_factory=dict)


class Item(BaseItem):
    type: Literal["REDIRECT", "EXTERNAL_REDIRECT"]
    url: str


class Section(BaseItem):
    items: list[Item] = Field(default_factory=list)


class NavigationEntry(BaseItem):
    icon: str
    type: Literal["EXPANDABLE", "REDIRECT"]
    url: str | None = None
    sections: list[Section] | None = None


class Navigation(BaseModel):
    entries: list[NavigationEntry] = Field(default_factory=list)

    def visible_entries(self) -> list[NavigationEntry]:
        """Entradas que no están marcadas como ocultas en el CRM."""

        return [e for e in self.entries if not (e.access and e.access.hide_from_crm)]
