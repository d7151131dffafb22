"""Logging estructurado (structlog).

Responsabilidad:
- Configurar una única vez la cadena de processors sobre `logging` stdlib.
- Entregar loggers con nombre para adaptadores y CLI.

Formato:
- `console`: salida legible para desarrollo y tests.
- `json`: una línea JSON por evento (agregadores de logs).
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars
from structlog.typing import Processor

from core.config import AppSettings


def configure_logging(settings: AppSettings | None = None) -> None:
    settings = settings or AppSettings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    processors: list[Processor] = [
        merge_contextvars,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
    ]
    if settings.log_format == "json":
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors += [
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ]

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
        force=True,
    )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> Any:
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(logger_name=name)
    return logger
