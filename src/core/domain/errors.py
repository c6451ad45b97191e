"""Errors raised by employee data sources.

Two kinds only:
- `TransportFailure`: the request never produced an HTTP response
  (DNS, refused connection, timeout).
- `ResponseFailure`: a response arrived but was not usable
  (non-2xx status, malformed or mismatching JSON body).
"""

from __future__ import annotations

DEFAULT_FAILURE_MESSAGE = "Failed to fetch data"


class EmployeeSourceError(Exception):
    """Base error for anything that prevents loading the employee list."""

    def __init__(self, message: str | None = None) -> None:
        self.message = message or DEFAULT_FAILURE_MESSAGE
        super().__init__(self.message)


class TransportFailure(EmployeeSourceError):
    """Network level failure; keeps the underlying error message when there is one."""


class ResponseFailure(EmployeeSourceError):
    """The endpoint answered with something we cannot use."""

    def __init__(self, message: str | None = None, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
