"""
car_service_api.auth.deps

FastAPI dependency functions for the access guard.

Responsibilities:
- Convert the `access_token` cookie into a typed `Principal`.
- Enforce identity isolation: callers may only query their own records.
"""

from __future__ import annotations

import structlog
from fastapi import Depends, HTTPException, Query, Request
from fastapi.security import APIKeyCookie
from starlette.status import HTTP_401_UNAUTHORIZED

from car_service_api.api.deps import settings_dep
from car_service_api.auth.cookies import ACCESS_COOKIE
from car_service_api.auth.jwt import JwtConfig, JwtValidationError, decode_and_validate
from car_service_api.auth.models import Principal
from car_service_api.observability.logging import get_logger
from car_service_api.settings import Settings

log = get_logger(__name__)

_cookie = APIKeyCookie(name=ACCESS_COOKIE, auto_error=False)

TOKEN_REJECTED = "Unauthorized access by token"
EMAIL_REJECTED = "Unauthorized access by email"


def get_principal(
    request: Request,
    token: str | None = Depends(_cookie),
    settings: Settings = Depends(settings_dep),
) -> Principal:
    if not token:
        log.info("auth_rejected", reason="missing_credential")
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail=TOKEN_REJECTED)

    try:
        # Signature and registered claims (iss/aud/exp/iat/sub).
        payload = decode_and_validate(cfg=JwtConfig.from_settings(settings), token=token)
    except JwtValidationError as e:
        log.info("auth_rejected", reason="invalid_credential", error=str(e))
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail=TOKEN_REJECTED) from e

    email = payload.get("email") or payload.get("sub")
    if not isinstance(email, str) or not email:
        log.info("auth_rejected", reason="invalid_subject")
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail=TOKEN_REJECTED)

    principal = Principal(email=email)
    request.state.principal = principal
    structlog.contextvars.bind_contextvars(principal=email)
    return principal


def require_email_match(
    email: str | None = Query(default=None),
    principal: Principal = Depends(get_principal),
) -> Principal:
    # A valid credential only grants access to the caller's own records.
    if not email or email != principal.email:
        log.info("auth_rejected", reason="identity_mismatch", requested=email)
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail=EMAIL_REJECTED)
    return principal


# --- Module Notes -----------------------------------------------------------
# The guard keeps no session state: every request is verified from its cookie alone.
