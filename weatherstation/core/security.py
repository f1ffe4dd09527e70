from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from passlib.context import CryptContext

from weatherstation.core.config import Settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

READ_SCOPE = "station:read"
WRITE_SCOPE = "station:write"
ALL_SCOPES = [READ_SCOPE, WRITE_SCOPE]


@dataclass(frozen=True)
class TokenClaims:
    subject: str
    scopes: tuple[str, ...]

    def allows(self, scope: str) -> bool:
        return scope in self.scopes


@dataclass(frozen=True)
class IssuedToken:
    access_token: str
    expires_in: int
    scopes: tuple[str, ...]


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def grant_scopes(requested: list[str], allowed: list[str]) -> tuple[str, ...]:
    """Scopes a token may carry: the requested subset of ``allowed``.

    Requests naming no known scope fall back to everything allowed.
    """
    granted = tuple(s for s in requested if s in allowed)
    return granted or tuple(allowed)


def issue_token(
    *,
    subject: str,
    scopes: tuple[str, ...],
    settings: Settings,
    now: datetime | None = None,
) -> IssuedToken:
    now = now or datetime.now(tz=timezone.utc)
    lifetime = timedelta(minutes=settings.access_token_expire_minutes)
    payload: dict[str, Any] = {
        "sub": subject,
        "scopes": list(scopes),
        "iat": now,
        "exp": now + lifetime,
    }
    return IssuedToken(
        access_token=jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm),
        expires_in=int(lifetime.total_seconds()),
        scopes=scopes,
    )


def read_token(token: str, *, settings: Settings) -> TokenClaims:
    """Decode and validate a bearer token.

    Raises ``jwt.PyJWTError`` for bad signatures, expiry, or malformed claims.
    """
    payload = jwt.decode(
        token,
        settings.secret_key,
        algorithms=[settings.algorithm],
        options={"require": ["exp", "sub"]},
    )
    sub = payload.get("sub")
    scopes = payload.get("scopes", [])
    if not isinstance(sub, str) or not isinstance(scopes, list):
        raise jwt.InvalidTokenError("Malformed token claims")
    return TokenClaims(subject=sub, scopes=tuple(str(s) for s in scopes))
