"""Tests for environment settings."""

import pytest

from uptime_scout.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("CONNECT_TIMEOUT", "COMMAND_TIMEOUT", "PATCH_THRESHOLD_DAYS", "TRANSPORT"):
        monkeypatch.delenv(f"UPTIME_SCOUT_{key}", raising=False)

    settings = Settings.from_env()

    assert settings.connect_timeout == 10
    assert settings.command_timeout == 30
    assert settings.patch_threshold_days == 30.0
    assert settings.transport == "http"


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("UPTIME_SCOUT_CONNECT_TIMEOUT", "3")
    monkeypatch.setenv("UPTIME_SCOUT_PATCH_THRESHOLD_DAYS", "14.5")
    monkeypatch.setenv("UPTIME_SCOUT_DEFAULT_USER", "ops")
    monkeypatch.setenv("UPTIME_SCOUT_TRANSPORT", "STDIO")
    monkeypatch.setenv("UPTIME_SCOUT_LOG_LEVEL", "debug")
    monkeypatch.setenv("UPTIME_SCOUT_LOG_COLORS", "off")

    settings = Settings.from_env()

    assert settings.connect_timeout == 3
    assert settings.patch_threshold_days == 14.5
    assert settings.default_user == "ops"
    assert settings.transport == "stdio"
    assert settings.log_level == "DEBUG"
    assert settings.log_colors is False


def test_invalid_numbers_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("UPTIME_SCOUT_COMMAND_TIMEOUT", "soon")
    monkeypatch.setenv("UPTIME_SCOUT_PATCH_THRESHOLD_DAYS", "a month")

    settings = Settings.from_env()

    assert settings.command_timeout == 30
    assert settings.patch_threshold_days == 30.0


def test_unknown_transport_defaults_to_http(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("UPTIME_SCOUT_TRANSPORT", "carrier-pigeon")

    assert Settings.from_env().transport == "http"
