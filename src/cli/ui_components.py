"""Componentes de UI para CLI (Rich).

Separa los detalles visuales (tablas, banner) de la lógica de comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import AppSettings
from core.domain.api_mapping import ServiceName, resolve_service_url


def print_banner(console: Console) -> None:
    title = Text("ff-services", style="bold cyan")
    subtitle = Text("Clientes HTTP de la plataforma • Tracking por lotes", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_services_table(settings: AppSettings) -> Table:
    """Tabla con cada servicio y su URL resuelta (overrides incluidos)."""

    table = Table(title="Backend Services")
    table.add_column("Service", style="cyan", no_wrap=True)
    table.add_column("URL", style="magenta")
    table.add_column("Override", style="yellow")
    for service in ServiceName:
        override = "yes" if service.value in settings.service_paths else ""
        table.add_row(service.value, resolve_service_url(service, settings), override)
    return table

