"""
tests.test_settings

Configuration loading and fail-fast startup.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from car_service_api.api import __main__ as entrypoint
from car_service_api.settings import Settings, get_settings


def test_secret_is_required(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CAR_SERVICE_JWT_SECRET", raising=False)
    with pytest.raises(ValidationError):
        Settings()

    monkeypatch.setenv("CAR_SERVICE_JWT_SECRET", "")
    with pytest.raises(ValidationError):
        Settings()


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CAR_SERVICE_JWT_SECRET", "s3cret")
    monkeypatch.setenv("CAR_SERVICE_API_PORT", "5000")
    monkeypatch.setenv("CAR_SERVICE_DATABASE_URL", "sqlite+aiosqlite:///./x.db")

    settings = Settings()
    assert settings.api_port == 5000
    assert settings.access_token_ttl_seconds == 3600
    assert settings.cookie_samesite == "none"
    # Secrets stay out of repr/logs.
    assert "s3cret" not in repr(settings)
    assert "x.db" not in repr(settings)


def test_entrypoint_exits_without_secret(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CAR_SERVICE_JWT_SECRET", raising=False)
    get_settings.cache_clear()
    try:
        with pytest.raises(SystemExit) as exc:
            entrypoint.main()
        assert exc.value.code == 1
    finally:
        get_settings.cache_clear()
