"""Settings: USER_MIN_AGE is required, integer and non-negative."""

import pytest
from pydantic import ValidationError

from user_registry.config import Settings, get_settings


def test_reads_min_age_from_env(monkeypatch):
    monkeypatch.setenv("USER_MIN_AGE", "21")
    assert Settings(_env_file=None).user_min_age == 21


def test_missing_min_age_is_fatal(monkeypatch):
    monkeypatch.delenv("USER_MIN_AGE", raising=False)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


@pytest.mark.parametrize("raw", ["eighteen", "-1"])
def test_invalid_min_age_is_fatal(monkeypatch, raw):
    monkeypatch.setenv("USER_MIN_AGE", raw)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_logging_defaults(monkeypatch):
    monkeypatch.setenv("USER_MIN_AGE", "18")
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    settings = Settings(_env_file=None)
    assert settings.log_level == "INFO"
    assert settings.log_format == "json"


def test_settings_are_immutable(monkeypatch):
    monkeypatch.setenv("USER_MIN_AGE", "18")
    settings = Settings(_env_file=None)
    with pytest.raises(ValidationError):
        settings.user_min_age = 3


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
