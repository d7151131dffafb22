"""Façade del openimmo-ftp-access-service (destinatarios de informes)."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

import httpx

from adapters.http_client import APIClient
from core.config import AppSettings
from core.domain.api_mapping import ServiceName
from core.domain.models import ApiResponse


class OpenimmoReportRecipientsController(APIClient):
    def __init__(self, settings: AppSettings | None = None, client: httpx.AsyncClient | None = None) -> None:
        super().__init__(ServiceName.OPENIMMO_FTP_ACCESS, settings, client)

    async def fetch_all(self) -> ApiResponse:
        """Destinatarios globales de alertas; `data` es `{"recipients": [...]}`."""

        return await self.invoke_api_with_error_handling("/report", "GET")

    async def update_report_recipients(self, recipients: Sequence[Mapping[str, Any]]) -> ApiResponse:
        return await self.invoke_api_with_error_handling("/report", "PUT", {"recipients": list(recipients)})
