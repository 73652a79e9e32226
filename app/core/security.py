"""Supabase access-token verification. Sign-in itself happens at Supabase Auth."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass

import jwt
from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class CurrentUser:
    """Identity taken from a verified access token."""

    id: uuid.UUID
    email: str | None = None


def decode_access_token(token: str, settings: Settings) -> CurrentUser:
    """
    Verify an HS256 Supabase JWT and return the user it names.
    Raises jwt.PyJWTError (or ValueError for a malformed subject) when invalid.
    """
    if not settings.supabase_jwt_secret:
        raise jwt.InvalidTokenError("JWT secret is not configured")
    claims = jwt.decode(
        token,
        settings.supabase_jwt_secret,
        algorithms=["HS256"],
        audience=settings.supabase_jwt_audience,
        options={"require": ["sub", "exp"]},
    )
    return CurrentUser(id=uuid.UUID(claims["sub"]), email=claims.get("email"))


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> CurrentUser:
    """Dependency: the authenticated caller, or 401."""
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=401, detail="Unauthorized")
    try:
        return decode_access_token(credentials.credentials, settings)
    except (jwt.PyJWTError, ValueError) as e:
        logger.info("Rejected access token: %s", e)
        raise HTTPException(status_code=401, detail="Unauthorized") from e
