"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, get_user_env_file

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(settings: AppSettings, url: str) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
    except Exception as exc:
        return False, str(exc) or exc.__class__.__name__
    return response.is_success, f"HTTP {response.status_code}"


@app.command()
def run() -> None:
    """Show the effective configuration and check the endpoint."""

    settings = AppSettings()

    table = Table(title="roster doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Endpoint", "OK", settings.employees_url)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "NONE", str(env_file))

    ok_http, detail_http = asyncio.run(_check_http(settings, settings.employees_url))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        _console.print(
            "\n[yellow]Note:[/yellow] set `ROSTER_BASE_URL` / `ROSTER_EMPLOYEES_PATH` to point at another endpoint."
        )
        raise typer.Exit(code=1)

