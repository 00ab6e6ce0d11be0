"""
car_service_api.api.routers.auth

Token issuance and logout.

Responsibilities:
- `POST /jwt`: sign a one-hour credential for an email and set it as a cookie.
- `POST /logout`: clear the credential cookie.

No password check happens here; identity is asserted by the caller.
"""

from __future__ import annotations

from datetime import timedelta

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from car_service_api.api.deps import settings_dep
from car_service_api.api.errors import error_body
from car_service_api.auth.cookies import access_cookie_kwargs, clear_access_cookie_kwargs
from car_service_api.auth.jwt import JwtConfig, JwtIssueError, issue_token
from car_service_api.observability.logging import get_logger
from car_service_api.settings import Settings

log = get_logger(__name__)

router = APIRouter(tags=["auth"])


class TokenRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    email: str = Field(min_length=1, max_length=320)


class SuccessResponse(BaseModel):
    success: bool = True


@router.post("/jwt", response_model=SuccessResponse)
async def issue_access_token(
    body: TokenRequest,
    response: Response,
    settings: Settings = Depends(settings_dep),
) -> SuccessResponse | JSONResponse:
    try:
        token = issue_token(
            cfg=JwtConfig.from_settings(settings),
            email=body.email,
            ttl=timedelta(seconds=settings.access_token_ttl_seconds),
        )
    except JwtIssueError as e:
        log.error("token_issue_failed", error=str(e))
        # Bare error flag; the cause stays in the logs.
        return JSONResponse(status_code=HTTP_500_INTERNAL_SERVER_ERROR, content=error_body())

    response.set_cookie(**access_cookie_kwargs(settings, token))
    response.headers["Cache-Control"] = "no-store"
    log.info("token_issued", email=body.email)
    return SuccessResponse()


@router.post("/logout", response_model=SuccessResponse)
async def logout(
    response: Response,
    settings: Settings = Depends(settings_dep),
) -> SuccessResponse:
    # Callable without a (valid) cookie so clients can always reset their session.
    response.set_cookie(**clear_access_cookie_kwargs(settings))
    response.headers["Cache-Control"] = "no-store"
    log.info("logout")
    return SuccessResponse()
