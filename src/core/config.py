"""Configuración de los clientes.

- `AppSettings` (pydantic-settings) lee variables `FF_SERVICES_*` y, por
  debajo, el `.env` del proyecto y el `.env` global del usuario.
- `doctor configure` persiste en el `.env` global vía `write_user_env_vars`.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from dotenv import set_key
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_APP_DIR = "ff-services"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario según la plataforma."""

    if sys.platform.startswith("win"):
        return Path(os.environ.get("APPDATA", str(Path.home()))) / _APP_DIR
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / _APP_DIR
    return Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config") / _APP_DIR


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Actualiza claves del `.env` global; `None` conserva el valor previo."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    env_path.touch(exist_ok=True)
    for key, value in values.items():
        if value is not None:
            set_key(str(env_path), key, value, quote_mode="never")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Las variables de entorno prevalecen sobre los ficheros; entre ficheros,
    el `.env` global del usuario prevalece sobre el del proyecto.
    """

    model_config = SettingsConfigDict(
        env_prefix="FF_SERVICES_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    base_url: str = Field(
        default="http://localhost:8080",
        min_length=8,
        description="URL del gateway de la plataforma; se le concatena el base path de cada servicio.",
    )
    api_token: str | None = Field(
        default=None,
        description="Token bearer enviado en la cabecera Authorization.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="ff-services/0.1",
        min_length=1,
        description="User-Agent para las peticiones a la plataforma.",
    )
    app_base_url: str | None = Field(
        default=None,
        description="URL pública de la aplicación cliente (callback por defecto de Mailchimp).",
    )

    behaviour_flush_interval_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Ventana mínima entre dos envíos de eventos de tracking.",
    )
    service_paths: dict[str, str] = Field(
        default_factory=dict,
        description="Overrides de base path por servicio (p.ej. {'entity-service': '/entity'}).",
    )

    log_level: str = Field(
        default="INFO",
        description="Nivel de logging (DEBUG, INFO, WARNING, ...).",
    )
    log_format: str = Field(
        default="console",
        pattern="^(console|json)$",
        description="Formato de salida del logging: 'console' o 'json'.",
    )

    def callback_base_url(self) -> str:
        """URL base de la app para callbacks; cae en `base_url` si no está definida."""

        return self.app_base_url or self.base_url
