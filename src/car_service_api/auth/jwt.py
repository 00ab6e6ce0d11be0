"""
car_service_api.auth.jwt

JWT issuing and validation helpers.

Responsibilities:
- Issue short-lived HS256 JWTs proving an email identity.
- Decode and validate JWTs with strict claim requirements (iss/aud/exp/iat/sub).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from jwt import InvalidTokenError, PyJWTError

from car_service_api.settings import Settings


@dataclass(frozen=True, slots=True)
class JwtConfig:
    # Algorithm/issuer/audience are enforced during decoding.
    alg: str
    issuer: str
    audience: str
    secret: str

    @classmethod
    def from_settings(cls, settings: Settings) -> JwtConfig:
        return cls(
            alg=settings.jwt_alg,
            issuer=settings.jwt_issuer,
            audience=settings.jwt_audience,
            secret=settings.jwt_secret,
        )


class JwtIssueError(Exception):
    pass


class JwtValidationError(Exception):
    pass


def issue_token(
    *,
    cfg: JwtConfig,
    email: str,
    ttl: timedelta = timedelta(hours=1),
    now: datetime | None = None,
) -> str:
    if not email:
        raise JwtIssueError("email is required")
    issued_at = now or datetime.now(tz=UTC)
    payload: dict[str, Any] = {
        "iss": cfg.issuer,
        "aud": cfg.audience,
        "sub": email,
        "email": email,
        "iat": int(issued_at.timestamp()),
        "exp": int((issued_at + ttl).timestamp()),
    }
    try:
        return jwt.encode(payload, cfg.secret, algorithm=cfg.alg)
    except (PyJWTError, NotImplementedError, TypeError, ValueError) as e:
        # Unknown algorithm or unusable key material.
        raise JwtIssueError(str(e)) from e


def decode_and_validate(*, cfg: JwtConfig, token: str) -> dict[str, Any]:
    try:
        return jwt.decode(
            token,
            cfg.secret,
            algorithms=[cfg.alg],
            issuer=cfg.issuer,
            audience=cfg.audience,
            options={
                "require": ["exp", "iat", "iss", "aud", "sub"],
            },
        )
    except InvalidTokenError as e:
        raise JwtValidationError(str(e)) from e


# --- Module Notes -----------------------------------------------------------
# Token issuing is used by `api/routers/auth.py`; validation by `auth/deps.py`.
