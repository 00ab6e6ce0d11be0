"""
car_service_api.auth.cookies

Session cookie attributes for the access token.

Responsibilities:
- Build `Response.set_cookie` kwargs for issuing and clearing the credential.
"""

from __future__ import annotations

from typing import Any

from car_service_api.settings import Settings

ACCESS_COOKIE = "access_token"


def access_cookie_kwargs(settings: Settings, token: str) -> dict[str, Any]:
    return {
        "key": ACCESS_COOKIE,
        "value": token,
        "max_age": settings.access_token_ttl_seconds,
        "httponly": True,
        "secure": settings.cookie_secure,
        "samesite": settings.cookie_samesite,
        "path": "/",
    }


def clear_access_cookie_kwargs(settings: Settings) -> dict[str, Any]:
    # Attributes must match the issuing cookie or browsers keep the issued cookie.
    return {
        "key": ACCESS_COOKIE,
        "value": "",
        "max_age": 0,
        "expires": 0,
        "httponly": True,
        "secure": settings.cookie_secure,
        "samesite": settings.cookie_samesite,
        "path": "/",
    }
