"""Wrapper de httpx para los servicios de la plataforma.

Responsabilidad:
- `build_async_client` estandariza timeouts, headers y autenticación.
- `APIClient` liga un base path a las dos primitivas de reenvío:
  `invoke_api` (errores propagados) e `invoke_api_with_error_handling`
  (errores normalizados en `ApiResponse.error` y logueados).

Reglas de forma de la petición:
- Query params con valor `None` se descartan.
- Valores de cabecera `None` se descartan; el resto se convierte a str.
- Body `None` o `""` no envía cuerpo; con `files` se envía multipart.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Mapping

import httpx
from pydantic import TypeAdapter, ValidationError
from pydantic_core import to_jsonable_python

from core.config import AppSettings
from core.domain.api_mapping import ServiceName, resolve_service_url
from core.domain.models import ApiError, ApiResponse
from core.logging import get_logger


def default_headers(settings: AppSettings) -> dict[str, str]:
    """Cabeceras comunes a toda petición: User-Agent, Accept y token bearer."""

    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json, text/plain, */*",
    }
    if settings.api_token:
        headers["Authorization"] = f"Bearer {settings.api_token}"
    return headers


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con los defaults de la plataforma."""

    settings = settings or AppSettings()
    headers = default_headers(settings)
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
    )


def clean_params(params: Mapping[str, Any] | None) -> dict[str, Any]:
    if not params:
        return {}
    return {k: v for k, v in params.items() if v is not None}


def clean_headers(headers: Mapping[str, Any] | None) -> dict[str, str]:
    if not headers:
        return {}
    return {k: str(v) for k, v in headers.items() if v is not None}


def decode_body(response: httpx.Response) -> Any:
    """Decodifica el cuerpo: vacío -> None, JSON -> objeto, resto -> texto."""

    if not response.content:
        return None
    content_type = response.headers.get("content-type", "")
    if "json" in content_type:
        try:
            return response.json()
        except ValueError:
            return response.text
    return response.text


@lru_cache(maxsize=128)
def _type_adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def _validate(data: Any, response_type: Any) -> Any:
    if response_type is None:
        return data
    return _type_adapter(response_type).validate_python(data)


def _error_message(details: Any, response: httpx.Response) -> str:
    if isinstance(details, dict):
        for key in ("message", "error", "detail"):
            value = details.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
    return f"HTTP {response.status_code} {response.reason_phrase}".strip()


def _to_api_response(response: httpx.Response, data: Any) -> ApiResponse:
    return ApiResponse(
        status_code=response.status_code,
        data=data,
        headers=dict(response.headers),
    )


class APIClient:
    """Cliente base de un servicio backend.

    Si se inyecta `client`, todas las llamadas lo reutilizan (el llamador
    es dueño de su ciclo de vida) y las cabeceras de `default_headers` se
    añaden a cada petición. Si no, cada llamada abre y cierra un
    cliente con `build_async_client`.
    """

    def __init__(
        self,
        service: ServiceName,
        settings: AppSettings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._service = service
        self._settings = settings or AppSettings()
        self._client = client
        self._log = get_logger(f"ff_services.{service.value}")

    @property
    def service(self) -> ServiceName:
        return self._service

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @property
    def base_url(self) -> str:
        return resolve_service_url(self._service, self._settings)

    def url_for(self, path: str) -> str:
        if not path:
            return self.base_url
        if not path.startswith("/"):
            path = "/" + path
        return self.base_url + path

    async def _send(
        self,
        method: str,
        url: str,
        body: Any = None,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, Any] | None = None,
        files: Mapping[str, Any] | None = None,
    ) -> httpx.Response:
        kwargs: dict[str, Any] = {
            "params": clean_params(params),
            "headers": clean_headers(headers),
        }
        has_body = body is not None and body != ""
        if files is not None:
            kwargs["files"] = files
            if has_body:
                kwargs["data"] = body
        elif has_body:
            kwargs["json"] = to_jsonable_python(body, by_alias=True)

        self._log.debug("Sending request", method=method, url=url, params=kwargs["params"])

        if self._client is not None:
            # Token y User-Agent salen de estas settings, no del cliente compartido.
            merged = httpx.Headers(default_headers(self._settings))
            merged.update(kwargs["headers"])
            kwargs["headers"] = merged
            return await self._client.request(method, url, **kwargs)
        async with build_async_client(self._settings) as client:
            return await client.request(method, url, **kwargs)

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
        """Reenvía la petición y propaga cualquier error.

        Raises:
            httpx.HTTPStatusError: status 4xx/5xx.
            httpx.HTTPError: fallos de transporte (timeout, conexión).
            pydantic.ValidationError: el cuerpo no encaja con `response_type`.
        """

        response = await self._send(
            method.upper(),
            self.url_for(path),
            body,
            params=params,
            headers=headers,
            files=files,
        )
        response.raise_for_status()
        return _to_api_response(response, _validate(decode_body(response), response_type))

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
        """Reenvía la petición; los fallos vuelven en `ApiResponse.error`."""

        method = method.upper()
        url = self.url_for(path)
        try:
            response = await self._send(
                method,
                url,
                body,
                params=params,
                headers=headers,
                files=files,
            )
        except httpx.HTTPError as exc:
            error = ApiError(
                kind="transport",
                message=str(exc) or exc.__class__.__name__,
                method=method,
                url=url,
            )
            return self._failure(error)

        data = decode_body(response)
        if response.is_error:
            error = ApiError(
                kind="http",
                message=_error_message(data, response),
                method=method,
                url=url,
                status_code=response.status_code,
                details=data,
            )
            return self._failure(error, response, data)

        try:
            data = _validate(data, response_type)
        except ValidationError as exc:
            error = ApiError(
                kind="invalid_response",
                message=f"{exc.error_count()} validation error(s) for {response_type!r}",
                method=method,
                url=url,
                status_code=response.status_code,
                details=exc.errors(include_url=False),
            )
            return self._failure(error, response, data)

        return _to_api_response(response, data)

    def _failure(
        self,
        error: ApiError,
        response: httpx.Response | None = None,
        data: Any = None,
    ) -> ApiResponse:
        self._log.warning(
            "Request failed",
            kind=error.kind,
            method=error.method,
            url=error.url,
            status_code=error.status_code,
            message=error.message,
        )
        return ApiResponse(
            status_code=response.status_code if response is not None else None,
            data=data,
            headers=dict(response.headers) if response is not None else {},
            error=error,
        )
