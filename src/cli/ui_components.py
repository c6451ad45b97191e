"""UI components for the CLI (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Tables and panels are reused by the view and by `doctor`.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


def print_banner(console: Console) -> None:
    """Print the welcome banner.

    Skipped in non-interactive modes (JSON/pipelines).
    """

    title = Text("ROSTER", style="bold cyan")
    subtitle = Text("Employee directory", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_employees_table() -> Table:
    """Empty table with the employee columns."""

    table = Table(title="Employees", expand=False)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Profile", style="white")
    return table


def build_error_panel(message: str) -> Panel:
    """Notification shown when loading fails. The message is not markup-parsed."""

    return Panel(Text(message), title=Text("Error", style="bold red"), border_style="red", expand=False)
