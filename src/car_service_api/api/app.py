"""
car_service_api.api.app

FastAPI app factory for the car-service backend.

Responsibilities:
- Build the FastAPI application and register routers/middleware/error handlers.
- Own the DB engine for the app's lifetime and hand sessions to handlers.
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from car_service_api import __version__
from car_service_api.api.errors import install_exception_handlers
from car_service_api.api.routers.auth import router as auth_router
from car_service_api.api.routers.health import router as health_router
from car_service_api.api.routers.orders import router as orders_router
from car_service_api.api.routers.services import router as services_router
from car_service_api.db.init_db import init_db
from car_service_api.db.session import create_engine, create_sessionmaker
from car_service_api.observability.logging import configure_logging, get_logger
from car_service_api.observability.middleware import RequestContextMiddleware
from car_service_api.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        # One engine per app; handlers receive request-scoped sessions (see `api.deps`).
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        if settings.env in ("dev", "test"):
            # Prod runs Alembic migrations instead.
            await init_db(engine)
        try:
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Car Service API",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestContextMiddleware)
    install_exception_handlers(app)
    app.include_router(health_router, tags=["health"])
    app.include_router(auth_router)
    app.include_router(services_router)
    app.include_router(orders_router)

    return app


# --- Module Notes -----------------------------------------------------------
# This file is intentionally small: app composition stays here; request handling
# stays in routers and repositories.
