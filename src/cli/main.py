"""Typer application: `roster`.

Commands:
- `roster list`: fetch the employee list once and render it.
- `roster doctor ...`: configuration and connectivity checks.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from adapters.employee_gateway import InMemoryEmployeeGateway, RemoteEmployeeGateway
from adapters.employee_source import HttpEmployeeDataSource
from cli import doctor
from cli.employee_view import ConsoleEmployeeView, OutputFormat
from cli.ui_components import print_banner
from core.config import AppSettings
from core.interfaces.employees import EmployeeGateway
from core.services.employee_presenter import PresenterState

app = typer.Typer(no_args_is_help=True, help="Employee directory (fetch and list employees).")
app.add_typer(doctor.app, name="doctor")

logger = logging.getLogger(__name__)


def configure_logging(level: str | int) -> None:
    """Route stdlib logging through rich on stderr."""

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
        force=True,
    )


def load_settings() -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as exc:
        Console(stderr=True).print(f"[red]Invalid configuration:[/red]\n{exc}")
        raise typer.Exit(code=2) from exc


def build_gateway(settings: AppSettings, from_file: Path | None = None) -> EmployeeGateway:
    """Gateway for the `list` command: local file when given, HTTP otherwise."""

    if from_file is not None:
        return InMemoryEmployeeGateway.from_file(from_file)
    return RemoteEmployeeGateway(HttpEmployeeDataSource(settings))


@app.command(name="list")
def list_employees(
    json_output: bool = typer.Option(False, "--json", help="Print the employees as JSON instead of a table."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Do not print the banner."),
    from_file: Path | None = typer.Option(
        None,
        "--from-file",
        help="Read employees from a local JSON file with the endpoint's shape.",
        dir_okay=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Fetch the employee list and render it."""

    settings = load_settings()
    configure_logging(logging.DEBUG if verbose else settings.log_level)

    console = Console()
    output = OutputFormat.JSON if json_output else OutputFormat.TABLE
    if output is OutputFormat.TABLE and not no_banner:
        print_banner(console)

    view = ConsoleEmployeeView(
        console,
        gateway=build_gateway(settings, from_file),
        error_console=Console(stderr=True),
        output=output,
    )
    asyncio.run(view.start())

    if view.presenter.state is PresenterState.FAILED:
        logger.debug("Fetch failed: %s", view.presenter.last_error)
        raise typer.Exit(code=1)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
