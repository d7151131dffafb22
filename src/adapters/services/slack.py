"""Façade del slack-integration-service."""

from __future__ import annotations

import httpx

from adapters.http_client import APIClient
from core.config import AppSettings
from core.domain.api_mapping import ServiceName
from core.domain.models import ApiResponse


class SlackIntegrationController(APIClient):
    def __init__(self, settings: AppSettings | None = None, client: httpx.AsyncClient | None = None) -> None:
        super().__init__(ServiceName.SLACK_INTEGRATION, settings, client)

    async def fetch_channels(self) -> ApiResponse:
        return await self.invoke_api_with_error_handling("/channels")

    async def fetch_users(self) -> ApiResponse:
        return await self.invoke_api_with_error_handling("/users")
