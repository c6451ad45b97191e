"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) away from the CLI.
- Adapters (HTTP) and the CLI read configuration the same way.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://mocki.io/"
DEFAULT_EMPLOYEES_PATH = "v1/1a44a28a-7c86-4738-8a03-1eafeffe38c8"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "roster"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "roster"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "roster"
    return Path.home() / ".config" / "roster"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Application settings.

    Sources, in order: environment (`ROSTER_*`), project `.env`, then the
    per-user `.env` (see `get_user_env_file`).
    """

    model_config = SettingsConfigDict(
        env_prefix="ROSTER_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="Base URL of the employees service.",
    )
    employees_path: str = Field(
        default=DEFAULT_EMPLOYEES_PATH,
        min_length=1,
        description="Path segment of the employees endpoint, relative to base_url.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default="roster/0.1",
        min_length=1,
        description="User-Agent sent with every request.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level name for the CLI.",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @property
    def employees_url(self) -> str:
        """Full URL of the employees endpoint."""

        return self.base_url.rstrip("/") + "/" + self.employees_path.lstrip("/")
