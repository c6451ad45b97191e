"""Data access gateways.

The Presenter only sees `EmployeeGateway.get_employees()`, which always
returns one of `EmployeesLoaded` / `EmployeesFailed`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from adapters.employee_codec import parse_employee_response
from core.domain.errors import EmployeeSourceError
from core.domain.models import Employee, EmployeesFailed, EmployeesLoaded, FetchResult
from core.interfaces.employees import EmployeeDataSource, EmployeeGateway

logger = logging.getLogger(__name__)


class RemoteEmployeeGateway(EmployeeGateway):
    """Adapts an `EmployeeDataSource` to the two-case result."""

    def __init__(self, source: EmployeeDataSource) -> None:
        self._source = source

    async def get_employees(self) -> FetchResult:
        try:
            employees = await self._source.fetch_employees()
        except EmployeeSourceError as exc:
            return EmployeesFailed(message=exc.message)
        return EmployeesLoaded(employees=tuple(employees))


class InMemoryEmployeeGateway(EmployeeGateway):
    """Gateway answering with a fixed list or a fixed error.

    Exactly one of `employees` / `error` must be provided.
    """

    def __init__(
        self,
        employees: Sequence[Employee] | None = None,
        error: str | None = None,
    ) -> None:
        if (employees is None) == (error is None):
            raise ValueError("Provide exactly one of 'employees' or 'error'")
        self._result: FetchResult
        if employees is not None:
            self._result = EmployeesLoaded(employees=tuple(employees))
        else:
            self._result = EmployeesFailed(message=error)

    @classmethod
    def from_file(cls, path: Path) -> "InMemoryEmployeeGateway":
        """Load a local JSON document with the endpoint's shape.

        Unreadable or invalid files become a gateway that reports the error.
        """

        try:
            raw = path.read_bytes()
        except OSError as exc:
            logger.warning("Cannot read %s: %s", path, exc)
            return cls(error=f"Cannot read {path}: {exc.strerror or exc}")
        try:
            return cls(employees=parse_employee_response(raw))
        except EmployeeSourceError as exc:
            logger.warning("Invalid employees document %s", path)
            return cls(error=exc.message)

    async def get_employees(self) -> FetchResult:
        return self._result
