"""Façade del email-service (envío de correos)."""

from __future__ import annotations

import json
from typing import Any, Mapping

import httpx
from pydantic_core import to_jsonable_python

from adapters.http_client import APIClient
from core.config import AppSettings
from core.domain.api_mapping import ServiceName
from core.domain.models import ApiResponse


class EmailSendController(APIClient):
    def __init__(self, settings: AppSettings | None = None, client: httpx.AsyncClient | None = None) -> None:
        super().__init__(ServiceName.EMAIL, settings, client)

    async def send_mail(self, mail: Mapping[str, Any]) -> ApiResponse:
        """Envía un email HTML; el modelo viaja como campo multipart `model` (JSON)."""

        model = json.dumps(to_jsonable_python(mail, by_alias=True), ensure_ascii=False)
        return await self.invoke_api_with_error_handling(
            "/mails/html",
            "POST",
            files={"model": (None, model)},
        )

    async def send_mail_v2(self, draft_mail_entity_id: str, send_search_profiles_link: bool = False) -> ApiResponse:
        """Envía el borrador `draft_mail_entity_id` (schema draft_email).

        Con `send_search_profiles_link` el backend genera los enlaces a los
        perfiles de búsqueda durante el envío.
        """

        return await self.invoke_api_with_error_handling(
            f"/emails/send/{draft_mail_entity_id}",
            "POST",
            headers={"x-ff-version": 2},
            params={"sendSearchProfilesLink": send_search_profiles_link},
        )
