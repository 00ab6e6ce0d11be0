"""
tests.conftest

Shared fixtures: per-test SQLite database, app with lifespan driven explicitly,
and an HTTPS test client (the credential cookie is `Secure`).
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from datetime import datetime, timedelta
from typing import Any

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from car_service_api.api.app import create_app
from car_service_api.auth.jwt import JwtConfig, issue_token
from car_service_api.db.base import Base
from car_service_api.db.repositories.services import ServiceRepo
from car_service_api.settings import Settings

TEST_SECRET = "test-secret-do-not-use"

CATALOG: list[dict[str, Any]] = [
    {
        "service_id": "01",
        "title": "Full Car Repair",
        "price": "200.00",
        "description": "Complete inspection and repair of engine and body.",
        "img": "https://example.test/img/1.jpg",
        "facility": [{"name": "Instant Car Services", "details": "Same day"}],
    },
    {
        "service_id": "02",
        "title": "Engine Repair",
        "price": "150.00",
        "description": "Engine diagnostics and repair.",
    },
    {
        "service_id": "03",
        "title": "Automatic Services",
        "price": "300.00",
        "description": "Transmission flush and 100% fluid change.",
    },
]


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        env="test",
        log_level="WARNING",
        jwt_secret=TEST_SECRET,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
    )


@pytest_asyncio.fixture
async def app(settings: Settings) -> AsyncIterator[FastAPI]:
    app = create_app(settings=settings)
    # httpx ASGITransport does not run the lifespan; drive it explicitly.
    async with app.router.lifespan_context(app):
        yield app


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="https://testserver") as c:
        yield c


@pytest_asyncio.fixture
async def catalog(app: FastAPI) -> list[dict[str, Any]]:
    async with app.state.sessionmaker() as session:
        services = await ServiceRepo(session).insert_many(CATALOG)
        await session.commit()
        return [s.to_document() for s in services]


@pytest.fixture
def mint_token(settings: Settings):
    def _mint(
        email: str,
        *,
        secret: str | None = None,
        ttl: timedelta = timedelta(hours=1),
        now: datetime | None = None,
    ) -> str:
        cfg = JwtConfig.from_settings(settings)
        if secret is not None:
            cfg = JwtConfig(alg=cfg.alg, issuer=cfg.issuer, audience=cfg.audience, secret=secret)
        return issue_token(cfg=cfg, email=email, ttl=ttl, now=now)

    return _mint


@pytest_asyncio.fixture
async def broken_store(app: FastAPI) -> None:
    # Every table is gone, so any store call raises OperationalError.
    async with app.state.engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
