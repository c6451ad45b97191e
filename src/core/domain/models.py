"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation at the edge where JSON becomes `Employee` records.
- The same models serialize back to the documented wire shape.

Note:
- These models describe *what* the data is, not *how* it is fetched.
"""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Employee(BaseModel):
    """An employee record as published by the remote endpoint.

    Immutable value object: two records with the same fields are equal.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(
        ...,
        description="Display name of the employee.",
    )
    profile: str = Field(
        ...,
        description="Role/profile text shown under the name.",
    )


class EmployeeResponse(BaseModel):
    """Top-level payload of the employees endpoint: `{"employees": [...]}`."""

    model_config = ConfigDict(extra="ignore")

    employees: list[Employee] = Field(
        ...,
        description="Employees in the order the endpoint returned them.",
    )


class EmployeesLoaded(BaseModel):
    """Successful outcome of a fetch."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["loaded"] = "loaded"
    employees: tuple[Employee, ...] = Field(
        default_factory=tuple,
        description="Fetched employees, payload order preserved.",
    )


class EmployeesFailed(BaseModel):
    """Failed outcome of a fetch; `message` is shown to the user verbatim."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["failed"] = "failed"
    message: str = Field(
        ...,
        min_length=1,
        description="Human readable failure message.",
    )


FetchResult = Union[EmployeesLoaded, EmployeesFailed]
