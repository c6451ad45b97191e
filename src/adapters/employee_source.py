"""Remote data source: employees endpoint over HTTP.

One GET per call, no retries. Failures are reported as domain errors:
- transport problems -> `TransportFailure` (message of the httpx error)
- non-2xx, bad body, redirect loop -> `ResponseFailure` ("Failed to fetch data")
"""

from __future__ import annotations

import logging

import httpx

from adapters.employee_codec import parse_employee_response
from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.errors import ResponseFailure, TransportFailure
from core.domain.models import Employee
from core.interfaces.employees import EmployeeDataSource

logger = logging.getLogger(__name__)


class HttpEmployeeDataSource(EmployeeDataSource):
    """Fetches the employee list from `settings.employees_url`."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    @property
    def url(self) -> str:
        return self._settings.employees_url

    async def fetch_employees(self) -> list[Employee]:
        url = self.url
        logger.debug("GET %s", url)

        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.get(url)
        except httpx.TransportError as exc:
            logger.warning("Transport failure fetching employees: %r", exc)
            raise TransportFailure(str(exc)) from exc
        except httpx.HTTPError as exc:
            # Redirect loops and undecodable bodies: a response came back but is unusable.
            logger.warning("Unusable response fetching employees: %r", exc)
            raise ResponseFailure() from exc

        logger.debug("GET %s -> HTTP %s", url, response.status_code)
        if not response.is_success:
            logger.warning("Employees endpoint answered HTTP %s", response.status_code)
            raise ResponseFailure(status_code=response.status_code)

        try:
            employees = parse_employee_response(response.content)
        except ResponseFailure as exc:
            logger.warning("Unparseable employees payload from %s", url)
            exc.status_code = response.status_code
            raise

        logger.debug("Parsed %d employees", len(employees))
        return employees
