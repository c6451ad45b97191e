"""
Tests for AppSettings and the user .env helpers.
"""

import sys

import pytest
from pydantic import ValidationError

from core.config import (
    DEFAULT_BASE_URL,
    DEFAULT_EMPLOYEES_PATH,
    AppSettings,
    get_user_env_file,
)

linux_only = pytest.mark.skipif(sys.platform in ("win32", "darwin"), reason="XDG layout")


class TestAppSettings:
    def test_defaults(self):
        settings = AppSettings()

        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.employees_path == DEFAULT_EMPLOYEES_PATH
        assert settings.employees_url == "https://mocki.io/v1/1a44a28a-7c86-4738-8a03-1eafeffe38c8"
        assert settings.log_level == "WARNING"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("ROSTER_BASE_URL", "http://localhost:8000")
        monkeypatch.setenv("ROSTER_EMPLOYEES_PATH", "/api/employees")
        monkeypatch.setenv("ROSTER_LOG_LEVEL", "debug")

        settings = AppSettings()

        assert settings.employees_url == "http://localhost:8000/api/employees"
        assert settings.log_level == "DEBUG"

    def test_project_env_file(self, tmp_path):
        (tmp_path / ".env").write_text("ROSTER_HTTP_TIMEOUT_SECONDS=3.5\n", encoding="utf-8")

        assert AppSettings().http_timeout_seconds == 3.5

    @pytest.mark.parametrize(
        "field, value",
        [("http_timeout_seconds", 0), ("log_level", "loud"), ("base_url", "x")],
    )
    def test_invalid_values(self, field, value):
        with pytest.raises(ValidationError):
            AppSettings(**{field: value})


@linux_only
class TestUserEnvFile:
    def test_location_follows_xdg(self, tmp_path):
        assert get_user_env_file() == tmp_path / "xdg" / "roster" / ".env"

    def test_user_env_file_is_read(self):
        env_file = get_user_env_file()
        env_file.parent.mkdir(parents=True)
        env_file.write_text("ROSTER_EMPLOYEES_PATH=v2/people\n", encoding="utf-8")

        settings = AppSettings(_env_file=(".env", env_file))

        assert settings.employees_path == "v2/people"
