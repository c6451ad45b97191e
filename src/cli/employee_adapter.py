"""List adapter: binds employee records to table rows.

The backing list is replaced wholesale on every update and the whole view
is redrawn; there is no diffing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from rich.table import Table

from cli.ui_components import build_employees_table
from core.domain.models import Employee

DataSetObserver = Callable[[], None]


@dataclass(frozen=True)
class EmployeeRow:
    """Row view for one employee: the two bound text fields."""

    name_text: str
    profile_text: str


class EmployeeListAdapter:
    def __init__(self, employees: Iterable[Employee] = ()) -> None:
        self._employees: tuple[Employee, ...] = tuple(employees)
        self._observers: list[DataSetObserver] = []
        self._needs_redraw = True

    @property
    def item_count(self) -> int:
        return len(self._employees)

    @property
    def items(self) -> tuple[Employee, ...]:
        return self._employees

    @property
    def needs_redraw(self) -> bool:
        return self._needs_redraw

    def bind(self, position: int) -> EmployeeRow:
        """Bind the employee at `position` to a row view."""

        if position < 0 or position >= len(self._employees):
            raise IndexError(f"position {position} out of range (0..{len(self._employees) - 1})")
        employee = self._employees[position]
        return EmployeeRow(name_text=employee.name, profile_text=employee.profile)

    def rows(self) -> list[EmployeeRow]:
        return [self.bind(i) for i in range(self.item_count)]

    def update_data(self, employees: Iterable[Employee]) -> None:
        """Swap the backing list and invalidate the whole view."""

        self._employees = tuple(employees)
        self.notify_data_set_changed()

    def add_observer(self, observer: DataSetObserver) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def remove_observer(self, observer: DataSetObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def notify_data_set_changed(self) -> None:
        self._needs_redraw = True
        for observer in list(self._observers):
            observer()

    def mark_drawn(self) -> None:
        self._needs_redraw = False

    def render(self) -> Table:
        """Render every row into a rich table and clear the redraw flag."""

        table = build_employees_table()
        for row in self.rows():
            table.add_row(row.name_text, row.profile_text)
        self.mark_drawn()
        return table
