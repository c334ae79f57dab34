"""Runtime settings read from the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

DEFAULT_API_BASE_URL = "http://localhost:5124"
DEFAULT_CORS_ORIGINS = ("http://localhost:3000", "http://127.0.0.1:3000")


def _get_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    return stripped if stripped else default


def _get_int_env(name: str, default: int) -> int:
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError:
        return default


def _get_float_env(name: str, default: float) -> float:
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return float(raw_value)
    except ValueError:
        return default


def _get_optional_float_env(name: str) -> float | None:
    raw_value = os.getenv(name)
    if raw_value is None or not raw_value.strip():
        return None
    try:
        value = float(raw_value)
    except ValueError:
        return None
    return value if value > 0 else None


def _get_list_env(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw_value = os.getenv(name, "")
    items = tuple(item.strip() for item in raw_value.split(",") if item.strip())
    return items or default


@dataclass(frozen=True)
class Settings:
    """Connection and retry settings for the team processing service."""

    api_base_url: str = DEFAULT_API_BASE_URL
    http_timeout_seconds: float = 30.0
    first_team: int = 1
    last_team: int = 32
    poll_max_retries: int = 3
    poll_delay_seconds: float = 5.0
    run_timeout_seconds: float | None = None
    log_level: str = "INFO"
    log_file: str | None = None
    cors_origins: tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)

    @property
    def team_numbers(self) -> range:
        return range(self.first_team, self.last_team + 1)


def load_settings() -> Settings:
    """Build settings from ``SATURN_*`` environment variables."""

    first_team = max(1, _get_int_env("SATURN_FIRST_TEAM", 1))
    last_team = max(first_team, _get_int_env("SATURN_LAST_TEAM", 32))
    log_file = os.getenv("SATURN_LOG_FILE")
    return Settings(
        api_base_url=_get_str_env("SATURN_API_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/"),
        http_timeout_seconds=max(1.0, _get_float_env("SATURN_HTTP_TIMEOUT_SECONDS", 30.0)),
        first_team=first_team,
        last_team=last_team,
        poll_max_retries=max(0, _get_int_env("SATURN_POLL_MAX_RETRIES", 3)),
        poll_delay_seconds=max(0.0, _get_float_env("SATURN_POLL_DELAY_SECONDS", 5.0)),
        run_timeout_seconds=_get_optional_float_env("SATURN_RUN_TIMEOUT_SECONDS"),
        log_level=_get_str_env("SATURN_LOG_LEVEL", "INFO").upper(),
        log_file=log_file.strip() if log_file and log_file.strip() else None,
        cors_origins=_get_list_env("API_CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings for the running process."""

    return load_settings()
