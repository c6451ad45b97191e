"""Contracts between the Presenter, the View and the data layer.

Why Protocol:
- Structural contracts (duck typing) without rigid inheritance.
- The Presenter depends on these abstractions only, so tests can swap in
  fakes for the network client and for the screen.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from core.domain.models import Employee, FetchResult


@runtime_checkable
class EmployeeDataSource(Protocol):
    """Low level source of employees.

    Rules:
    - Returns the employees in source order.
    - Raises `core.domain.errors.EmployeeSourceError` on failure.
    """

    async def fetch_employees(self) -> list[Employee]:
        ...


@runtime_checkable
class EmployeeGateway(Protocol):
    """Capability used by the Presenter: "fetch employees".

    Never raises for expected failures; every call yields exactly one
    outcome (`EmployeesLoaded` or `EmployeesFailed`).
    """

    async def get_employees(self) -> FetchResult:
        ...


@runtime_checkable
class EmployeeView(Protocol):
    """Screen driven by the Presenter."""

    def show_loading(self) -> None:
        ...

    def hide_loading(self) -> None:
        ...

    def show_employees(self, employees: Sequence[Employee]) -> None:
        ...

    def show_error(self, message: str) -> None:
        ...
