"""
tests.test_settings

Env-driven configuration.
"""

from __future__ import annotations

from parcel_tracker.settings import Settings, get_settings


def test_defaults() -> None:
    settings = Settings()
    assert settings.service_name == "parcel-tracker"
    assert settings.database_url.startswith("sqlite+aiosqlite://")


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("PARCEL_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    monkeypatch.setenv("parcel_log_level", "DEBUG")
    monkeypatch.setenv("PARCEL_ENV", "test")

    settings = Settings()

    assert settings.database_url == "sqlite+aiosqlite:///:memory:"
    assert settings.log_level == "DEBUG"
    assert settings.env == "test"


def test_get_settings_is_cached() -> None:
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
