"""Modelos de respuesta y error (Pydantic v2).

Responsabilidad:
- `ApiResponse` es el resultado común de las dos primitivas de reenvío.
- `ApiError` normaliza los fallos en la política "handled".

Nota:
- El contenido de `data` es un contrato opaco del backend; solo se valida
  cuando el llamador pasa un `response_type`.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class ApiError(BaseModel):
    """Fallo normalizado de una llamada con manejo de errores."""

    kind: Literal["http", "transport", "invalid_response"] = Field(
        ...,
        description="Origen del fallo: respuesta no-2xx, error de red o cuerpo inválido.",
    )
    message: str = Field(
        ...,
        description="Mensaje legible (del backend si lo envía, si no del cliente).",
    )
    method: str = Field(..., description="Verbo HTTP de la petición.")
    url: str = Field(..., description="URL completa de la petición.")
    status_code: int | None = Field(
        default=None,
        description="Status HTTP (ausente en errores de transporte).",
    )
    details: Any = Field(
        default=None,
        description="Cuerpo de error decodificado, para trazabilidad.",
    )


class ApiResponse(BaseModel):
    """Respuesta de una llamada a un servicio backend."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    status_code: int | None = Field(
        default=None,
        description="Status HTTP; `None` si la petición no llegó a responder.",
    )
    data: Any = Field(
        default=None,
        description="Cuerpo decodificado (JSON, texto o `None` si vacío).",
    )
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Cabeceras de respuesta.",
    )
    error: ApiError | None = Field(
        default=None,
        description="Presente solo cuando la llamada falló (política handled).",
    )

    @property
    def is_success(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> ApiResponse:
        """Lanza `ApiCallError` si la respuesta lleva un error; si no, la devuelve."""

        if self.error is not None:
            raise ApiCallError(self.error)
        return self


class ApiCallError(Exception):
    """Excepción para propagar un `ApiError` ya normalizado."""

    def __init__(self, error: ApiError) -> None:
        self.error = error
        status = f" {error.status_code}" if error.status_code is not None else ""
        super().__init__(f"{error.method} {error.url} failed{status}: {error.message}")
