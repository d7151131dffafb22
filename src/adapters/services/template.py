"""Façade del template-service.

A diferencia del resto de servicios, devuelve directamente el cuerpo
decodificado (los listados devuelven `[]` si el cuerpo está vacío).
"""

from __future__ import annotations

from typing import Any, Mapping

import httpx

from adapters.http_client import APIClient
from core.config import AppSettings
from core.domain.api_mapping import ServiceName
from core.domain.models import ApiResponse


class TemplateService(APIClient):
    def __init__(self, settings: AppSettings | None = None, client: httpx.AsyncClient | None = None) -> None:
        super().__init__(ServiceName.TEMPLATE, settings, client)

    async def get_all_templates(self) -> list[Any]:
        response = await self.invoke_api("/templates", "GET")
        return response.data or []

    async def get_templates_by_type(self, template_type: str) -> list[Any]:
        response = await self.invoke_api("/templates", "GET", params={"templateType": template_type})
        return response.data or []

    async def create_template(self, body: Mapping[str, Any]) -> Any:
        response = await self.invoke_api("/templates", "POST", body)
        return response.data

    async def upload_content(self, template_id: str, content: Any, filename: str) -> ApiResponse:
        """Sube el contenido del template como multipart (campo `file`)."""

        return await self.invoke_api(
            f"/templates/{template_id}/content",
            "POST",
            files={"file": (filename, content)},
        )

    async def get_template_by_id(self, template_id: str) -> Any:
        response = await self.invoke_api(f"/templates/{template_id}", "GET")
        return response.data

    async def delete(self, template_id: str) -> Any:
        response = await self.invoke_api(f"/templates/{template_id}", "DELETE")
        return response.data

    async def update_template(self, body: Mapping[str, Any], template_id: str) -> Any:
        response = await self.invoke_api(f"/templates/{template_id}", "PUT", body)
        return response.data
