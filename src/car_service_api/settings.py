"""
car_service_api.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Refuse to build without a signing secret (startup fails fast).
- Hide secrets from repr/logging (JWT secret, database URL with credentials).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Env-driven configuration shared by the API, auth and persistence layers.

    `jwt_secret` has no default: `Settings()` raises a `ValidationError` when
    `CAR_SERVICE_JWT_SECRET` is absent or empty.
    """

    model_config = SettingsConfigDict(env_prefix="CAR_SERVICE_", case_sensitive=False)

    # Environment controls toggle behavior like auto-init DB tables.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "car-service-api"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 3000

    # Auth
    jwt_alg: str = "HS256"
    jwt_issuer: str = "car-service-api"
    jwt_audience: str = "car-service-web"
    jwt_secret: str = Field(min_length=1, repr=False)
    access_token_ttl_seconds: int = Field(default=60 * 60, ge=1)

    # Session cookie attributes; the web client is served from another origin.
    cookie_secure: bool = True
    cookie_samesite: Literal["lax", "strict", "none"] = "none"

    # Persistence (URL may embed credentials)
    database_url: str = Field(default="sqlite+aiosqlite:///./car_service.db", repr=False)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Tests build `Settings(...)` directly and override `get_settings` on the app.
