"""
Shared fixtures and fakes for the roster test-suite.
"""

from typing import Sequence

import pytest

from core.domain.models import Employee, EmployeesFailed, EmployeesLoaded, FetchResult


class RecordingView:
    """EmployeeView fake that records every call in order."""

    def __init__(self):
        self.calls = []

    def show_loading(self):
        self.calls.append(("show_loading",))

    def hide_loading(self):
        self.calls.append(("hide_loading",))

    def show_employees(self, employees: Sequence[Employee]):
        self.calls.append(("show_employees", list(employees)))

    def show_error(self, message: str):
        self.calls.append(("show_error", message))

    @property
    def names(self):
        return [call[0] for call in self.calls]


class StubGateway:
    """EmployeeGateway fake returning a fixed result."""

    def __init__(self, result: FetchResult):
        self.result = result
        self.calls = 0

    async def get_employees(self) -> FetchResult:
        self.calls += 1
        return self.result


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep tests away from the developer's .env files and ROSTER_* variables."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for name in (
        "ROSTER_BASE_URL",
        "ROSTER_EMPLOYEES_PATH",
        "ROSTER_HTTP_TIMEOUT_SECONDS",
        "ROSTER_USER_AGENT",
        "ROSTER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def employees():
    """Sample employees in payload order."""
    return [
        Employee(name="Ada Lovelace", profile="Android Developer"),
        Employee(name="Grace Hopper", profile="Backend Engineer"),
        Employee(name="Alan Turing", profile="QA Lead"),
    ]


@pytest.fixture
def employees_payload(employees):
    """Endpoint payload matching the `employees` fixture."""
    return {"employees": [{"name": e.name, "profile": e.profile} for e in employees]}


@pytest.fixture
def recording_view():
    return RecordingView()


@pytest.fixture
def loaded_gateway(employees):
    return StubGateway(EmployeesLoaded(employees=tuple(employees)))


@pytest.fixture
def failing_gateway():
    return StubGateway(EmployeesFailed(message="boom"))
