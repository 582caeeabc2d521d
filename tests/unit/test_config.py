"""Tests for Settings validation and derived properties."""

import logging

import pytest
from pydantic import ValidationError

from orgperm.core.config import Settings, get_settings


def test_defaults() -> None:
    settings = Settings(_env_file=None)
    assert settings.app_name == "orgperm"
    assert settings.enforce_permission_catalog is True
    assert settings.request_id_header == "X-Request-ID"


def test_cors_origins_split() -> None:
    settings = Settings(_env_file=None, allowed_origins="https://a.example, ,https://b.example")
    assert settings.cors_origins == ["https://a.example", "https://b.example"]


def test_empty_request_id_header_rejected() -> None:
    with pytest.raises(ValidationError, match="REQUEST_ID_HEADER"):
        Settings(_env_file=None, request_id_header="  ")


def test_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENFORCE_PERMISSION_CATALOG", "false")
    get_settings.cache_clear()
    try:
        assert get_settings().enforce_permission_catalog is False
    finally:
        get_settings.cache_clear()


def test_log_level_defaults_follow_debug() -> None:
    assert Settings(_env_file=None).effective_log_level == logging.INFO
    assert Settings(_env_file=None, debug=True).effective_log_level == logging.DEBUG


def test_explicit_log_level_wins() -> None:
    settings = Settings(_env_file=None, debug=True, log_level="warning")
    assert settings.log_level == "WARNING"
    assert settings.effective_log_level == logging.WARNING


def test_unknown_log_level_rejected() -> None:
    with pytest.raises(ValidationError, match="LOG_LEVEL"):
        Settings(_env_file=None, log_level="chatty")
