"""Console view of the employee list.

The view owns its Presenter and its List Adapter, both created once in
`__init__`. Results go to `console` (stdout); the spinner and error
notifications go to `error_console` (stderr) so JSON output stays clean.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from rich.console import Console
from rich.status import Status

from adapters.employee_codec import serialize_employees
from cli.employee_adapter import EmployeeListAdapter
from cli.ui_components import build_error_panel
from core.domain.models import Employee
from core.interfaces.employees import EmployeeGateway, EmployeeView
from core.services.employee_presenter import EmployeePresenter


class OutputFormat(str, Enum):
    TABLE = "table"
    JSON = "json"


class ConsoleEmployeeView(EmployeeView):
    def __init__(
        self,
        console: Console,
        *,
        gateway: EmployeeGateway,
        error_console: Console | None = None,
        output: OutputFormat = OutputFormat.TABLE,
    ) -> None:
        self._console = console
        self._error_console = error_console or Console(stderr=True)
        self._output = output
        self._status: Status | None = None

        self.adapter = EmployeeListAdapter([])
        self.adapter.add_observer(self._redraw)
        self.presenter = EmployeePresenter(self, gateway)

    async def start(self) -> None:
        """Run the screen's single flow: fetch and render."""

        await self.presenter.fetch_employees()

    def show_loading(self) -> None:
        if self._output is OutputFormat.JSON or self._status is not None:
            return
        self._status = self._error_console.status("Loading employees...", spinner="dots")
        self._status.start()

    def hide_loading(self) -> None:
        if self._status is None:
            return
        self._status.stop()
        self._status = None

    def show_employees(self, employees: Sequence[Employee]) -> None:
        self.adapter.update_data(employees)

    def show_error(self, message: str) -> None:
        self._error_console.print(build_error_panel(message))

    def _redraw(self) -> None:
        if self._output is OutputFormat.JSON:
            self._console.print(
                serialize_employees(self.adapter.items),
                markup=False,
                highlight=False,
                soft_wrap=True,
            )
            self.adapter.mark_drawn()
            return

        if self.adapter.item_count == 0:
            self._console.print("[dim]No employees.[/dim]")
            self.adapter.mark_drawn()
            return
        self._console.print(self.adapter.render())
