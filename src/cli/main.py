"""CLI entry point (Typer).

Commands:
- `services`: resolved base URL of every backend service.
- `track`: send tracking events through the batching client.
- `doctor`: diagnostics and interactive configuration.
"""

from __future__ import annotations

import asyncio
import json

import typer
from rich.console import Console

from adapters.services import BehaviourService
from cli import doctor
from cli.ui_components import build_services_table, print_banner
from core.config import AppSettings
from core.logging import configure_logging

app = typer.Typer(no_args_is_help=True, help="HTTP client façades for the platform backend services.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.callback()
def main(
    banner: bool = typer.Option(False, "--banner", help="Show the welcome banner."),
) -> None:
    configure_logging(AppSettings())
    if banner:
        print_banner(_console)


@app.command()
def services() -> None:
    """List every backend service with its resolved URL."""

    _console.print(build_services_table(AppSettings()))


async def _track_all(events: list[dict[str, object]], settings: AppSettings) -> int:
    behaviour = BehaviourService(settings)
    for event in events:
        behaviour.track(event)
    await behaviour.aclose()
    return len(events)


@app.command()
def track(
    events: list[str] = typer.Argument(..., help="Tracking events as JSON objects."),
) -> None:
    """Track events; they are sent in batches and drained before exit."""

    parsed: list[dict[str, object]] = []
    for raw in events:
        try:
            value = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise typer.BadParameter(f"invalid JSON event: {raw!r} ({exc.msg})") from exc
        if not isinstance(value, dict):
            raise typer.BadParameter(f"event must be a JSON object: {raw!r}")
        parsed.append(value)

    count = asyncio.run(_track_all(parsed, AppSettings()))
    _console.print(f"[green]Tracked {count} event(s).[/green]")


def run() -> None:
    app()
