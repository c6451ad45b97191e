"""Presenter for the employee list screen.

Owns the loading/success/error transitions and drives an `EmployeeView`.
The Presenter knows nothing about HTTP or rich; it only talks to the
`EmployeeGateway` and `EmployeeView` contracts.

State machine::

    IDLE -> LOADING -> SUCCESS | FAILED
    SUCCESS | FAILED -> LOADING   (the flow can be relaunched)

A fetch requested while another one is in flight is ignored.
"""

from __future__ import annotations

import logging
from enum import Enum

from core.domain.errors import DEFAULT_FAILURE_MESSAGE
from core.domain.models import EmployeesFailed, EmployeesLoaded
from core.interfaces.employees import EmployeeGateway, EmployeeView

logger = logging.getLogger(__name__)


class PresenterState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILED = "failed"


class EmployeePresenter:
    def __init__(self, view: EmployeeView, gateway: EmployeeGateway) -> None:
        self._view = view
        self._gateway = gateway
        self._state = PresenterState.IDLE
        self._last_error: str | None = None

    @property
    def state(self) -> PresenterState:
        return self._state

    @property
    def last_error(self) -> str | None:
        """Message of the last failed fetch, None after a success."""

        return self._last_error

    def _transition(self, state: PresenterState) -> None:
        logger.debug("Presenter state %s -> %s", self._state.value, state.value)
        self._state = state

    async def fetch_employees(self) -> None:
        """Load employees and push the outcome to the view."""

        if self._state is PresenterState.LOADING:
            logger.debug("Fetch already in flight; ignoring request")
            return

        self._transition(PresenterState.LOADING)
        self._view.show_loading()
        try:
            result = await self._gateway.get_employees()
        except BaseException as exc:
            self._view.hide_loading()
            self._last_error = str(exc) or DEFAULT_FAILURE_MESSAGE
            self._transition(PresenterState.FAILED)
            raise

        self._view.hide_loading()
        if isinstance(result, EmployeesLoaded):
            self._last_error = None
            self._transition(PresenterState.SUCCESS)
            self._view.show_employees(list(result.employees))
        elif isinstance(result, EmployeesFailed):
            self._last_error = result.message
            self._transition(PresenterState.FAILED)
            self._view.show_error(result.message)
        else:  # pragma: no cover
            raise TypeError(f"Unexpected fetch result: {result!r}")
