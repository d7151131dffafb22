"""Contrato de las primitivas de reenvío.

Reglas de diseño:
- Ambas primitivas son asíncronas (I/O HTTP).
- `invoke_api` propaga errores de transporte y status no-2xx.
- `invoke_api_with_error_handling` nunca lanza por fallos HTTP: los
  devuelve normalizados en `ApiResponse.error`.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

from core.domain.models import ApiResponse


@runtime_checkable
class ServiceClient(Protocol):
    """Contrato mínimo de un cliente ligado a un base path."""

    @property
    def base_url(self) -> str:
        """URL absoluta del servicio (gateway + base path)."""

        ...

    async def invoke_api(
        self,
        path: str,
        method: str = "GET",
        body: Any = None,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, Any] | None = None,
        files: Mapping[str, Any] | None = None,
        response_type: Any = None,
    ) -> ApiResponse:
        ...

    async def invoke_api_with_error_handling(
        self,
        path: str,
        method: str = "GET",
        body: Any = None,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, Any] | None = None,
        files: Mapping[str, Any] | None = None,
        response_type: Any = None,
    ) -> ApiResponse:
        ...
