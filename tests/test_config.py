from __future__ import annotations

from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

from saturn.core.config import Settings, load_settings


def test_defaults_match_the_service_contract(monkeypatch):
    for name in (
        "SATURN_API_BASE_URL",
        "SATURN_FIRST_TEAM",
        "SATURN_LAST_TEAM",
        "SATURN_POLL_MAX_RETRIES",
        "SATURN_POLL_DELAY_SECONDS",
        "SATURN_RUN_TIMEOUT_SECONDS",
        "API_CORS_ORIGINS",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()

    assert settings.api_base_url == "http://localhost:5124"
    assert list(settings.team_numbers) == list(range(1, 33))
    assert settings.poll_max_retries == 3
    assert settings.poll_delay_seconds == 5.0
    assert settings.run_timeout_seconds is None
    assert settings.cors_origins == ("http://localhost:3000", "http://127.0.0.1:3000")


def test_environment_overrides_and_bad_values(monkeypatch):
    monkeypatch.setenv("SATURN_API_BASE_URL", "http://teams.internal:8080/")
    monkeypatch.setenv("SATURN_LAST_TEAM", "4")
    monkeypatch.setenv("SATURN_POLL_MAX_RETRIES", "not-a-number")
    monkeypatch.setenv("SATURN_POLL_DELAY_SECONDS", "0.5")
    monkeypatch.setenv("SATURN_RUN_TIMEOUT_SECONDS", "120")
    monkeypatch.setenv("API_CORS_ORIGINS", "http://a.test, http://b.test")

    settings = load_settings()

    assert settings.api_base_url == "http://teams.internal:8080"
    assert list(settings.team_numbers) == [1, 2, 3, 4]
    assert settings.poll_max_retries == 3
    assert settings.poll_delay_seconds == 0.5
    assert settings.run_timeout_seconds == 120.0
    assert settings.cors_origins == ("http://a.test", "http://b.test")


def test_settings_team_range_is_inclusive():
    assert list(Settings(first_team=5, last_team=7).team_numbers) == [5, 6, 7]
