"""JSON codec for the employees payload.

Wire shape:

    {"employees": [{"name": "...", "profile": "..."}, ...]}
"""

from __future__ import annotations

import json
from typing import Iterable

from pydantic import ValidationError

from core.domain.errors import ResponseFailure
from core.domain.models import Employee, EmployeeResponse


def parse_employee_response(raw: str | bytes) -> list[Employee]:
    """Parse a response body into employees, keeping payload order.

    Raises `ResponseFailure` when the body is not JSON or does not match
    the expected shape.
    """

    try:
        return list(EmployeeResponse.model_validate_json(raw).employees)
    except ValidationError as exc:
        raise ResponseFailure() from exc


def employees_to_payload(employees: Iterable[Employee]) -> dict[str, list[dict[str, str]]]:
    response = EmployeeResponse(employees=list(employees))
    return response.model_dump(mode="json")


def serialize_employees(employees: Iterable[Employee], *, indent: int | None = 2) -> str:
    """Serialize employees to the documented JSON shape (UTF-8 friendly)."""

    return json.dumps(employees_to_payload(employees), ensure_ascii=False, indent=indent)
