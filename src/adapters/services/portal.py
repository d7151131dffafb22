"""Façade del portal-management-service (portales inmobiliarios y su autenticación)."""

from __future__ import annotations

from typing import Any, Mapping

import httpx

from adapters.http_client import APIClient
from core.config import AppSettings
from core.domain.api_mapping import ServiceName
from core.domain.models import ApiResponse


class PortalController(APIClient):
    def __init__(self, settings: AppSettings | None = None, client: httpx.AsyncClient | None = None) -> None:
        super().__init__(ServiceName.PORTAL_MANAGEMENT, settings, client)

    async def fetch_all(self, ignore_inactive_portals: bool = False, portal_type: str | None = None) -> ApiResponse:
        """Todos los portales; `portal_type` restringe el resultado por tipo."""

        return await self.invoke_api_with_error_handling(
            "/portals",
            "GET",
            params={"ignoreInactivePortals": ignore_inactive_portals, "type": portal_type},
        )

    async def fetch(self, portal_id: str) -> ApiResponse:
        return await self.invoke_api_with_error_handling(f"/portals/{portal_id}", "GET")

    async def delete(self, portal_id: str) -> ApiResponse:
        return await self.invoke_api_with_error_handling(f"/portals/{portal_id}", "DELETE")

    async def update(self, portal_id: str, portal: Mapping[str, Any]) -> ApiResponse:
        """Parchea el portal; sin puerto FTP el backend usa el 21."""

        return await self.invoke_api_with_error_handling(f"/portals/{portal_id}", "PATCH", portal)

    async def authenticate(self, portal_id: str, authentication: Mapping[str, Any]) -> ApiResponse:
        return await self.invoke_api_with_error_handling(
            f"/portals/{portal_id}/authenticate",
            "POST",
            authentication,
        )

    async def check_authentication(self, portal_id: str) -> ApiResponse:
        return await self.invoke_api_with_error_handling(f"/portals/{portal_id}/checkAuthentication", "GET")

    async def force_delete(self, portal_id: str) -> ApiResponse:
        return await self.invoke_api_with_error_handling(f"/portals/{portal_id}/force", "DELETE")

    async def create(
        self,
        portal_type: str,
        portal: Mapping[str, Any] | None = None,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, Any] | None = None,
    ) -> ApiResponse:
        """Crea un portal del tipo dado.

        `headers` se fusiona sobre el Content-Type JSON por defecto.
        """

        return await self.invoke_api_with_error_handling(
            f"/portals/create/{portal_type}",
            "POST",
            portal,
            params=params,
            headers={"Content-Type": "application/json", **(headers or {})},
        )

    async def is24_authentication_callback(
        self,
        portal_id: str,
        verifier: str,
        token: str,
        state: str,
    ) -> ApiResponse:
        return await self.invoke_api_with_error_handling(
            f"/portals/is24/authenticate/{portal_id}/callback",
            "GET",
            params={"oauth_verifier": verifier, "oauth_token": token, "state": state},
        )

    async def fetch_portal_types(self, company_market: str | None = None) -> ApiResponse:
        return await self.invoke_api_with_error_handling(
            "/portalTypes",
            "GET",
            params={"companyMarket": company_market},
        )

    async def fetch_predefined_portals(self, company_market: str | None = None) -> ApiResponse:
        return await self.invoke_api_with_error_handling(
            "/predefinedPortals",
            "GET",
            params={"companyMarket": company_market},
        )
