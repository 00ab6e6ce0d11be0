"""
car_service_api.api.errors

Exception handlers mapping failures onto `{"error": true, ...}` JSON bodies.

Responsibilities:
- Render `HTTPException`s (401/400/500 raised by guards and routers).
- Map request validation failures to 400.
- Map malformed identifiers and store failures to 500.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from car_service_api.db.ids import InvalidDocumentId
from car_service_api.observability.logging import get_logger

log = get_logger(__name__)


def error_body(message: str | None = None) -> dict[str, object]:
    body: dict[str, object] = {"error": True}
    if message:
        body["message"] = message
    return body


async def _http_exception(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail) if exc.detail else None),
        headers=getattr(exc, "headers", None),
    )


async def _validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
    log.info("invalid_request", errors=len(exc.errors()))
    return JSONResponse(status_code=HTTP_400_BAD_REQUEST, content=error_body("Invalid request"))


async def _invalid_document_id(_: Request, exc: InvalidDocumentId) -> JSONResponse:
    # Identifiers are not pre-validated by handlers; a bad one fails the store call.
    log.warning("store_error", error=str(exc))
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR, content=error_body("Invalid document id")
    )


async def _store_error(_: Request, exc: SQLAlchemyError) -> JSONResponse:
    log.error("store_error", error=str(exc), exc_info=exc)
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Database operation failed"),
    )


def install_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, _http_exception)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(InvalidDocumentId, _invalid_document_id)  # type: ignore[arg-type]
    app.add_exception_handler(SQLAlchemyError, _store_error)  # type: ignore[arg-type]
