"""`doctor`: configuration report, gateway reachability and interactive setup."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Check and configure the connection to the platform gateway.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc) or exc.__class__.__name__


@app.command()
def run() -> None:
    """Show the effective configuration and check that the gateway answers."""

    settings = AppSettings()

    table = Table(title="ff-services Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Base URL", "OK", settings.base_url)
    if settings.api_token:
        table.add_row("API token", "OK", "Bearer token configured")
    else:
        table.add_row("API token", "MISSING", "Requests will be sent unauthenticated")
    table.add_row("Callback URL", "OK", settings.callback_base_url())
    table.add_row("Tracking window", "OK", f"{settings.behaviour_flush_interval_seconds:g}s")
    table.add_row("Path overrides", "OK", str(len(settings.service_paths)))

    ok_http, detail_http = asyncio.run(_check_http(settings.base_url, settings))
    table.add_row("Gateway connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        _console.print(
            "\n[yellow]Note:[/yellow] Set FF_SERVICES_BASE_URL or run `ff-services doctor configure`."
        )


@app.command()
def configure() -> None:
    """Interactive setup (stores config in the user config .env)."""

    settings = AppSettings()

    base_url = typer.prompt("Gateway base URL", default=settings.base_url, show_default=True).strip()
    app_base_url = typer.prompt(
        "App base URL (callbacks)",
        default=settings.app_base_url or "",
        show_default=True,
    ).strip()
    api_token = typer.prompt("API token", default="", hide_input=True, show_default=False).strip()

    if not base_url:
        raise typer.BadParameter("base URL is required")

    env_path = write_user_env_vars(
        {
            "FF_SERVICES_BASE_URL": base_url,
            "FF_SERVICES_APP_BASE_URL": app_base_url or None,
            "FF_SERVICES_API_TOKEN": api_token or None,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
