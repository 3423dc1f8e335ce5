"""
HS256 bearer token management.

Tokens carry the user's storage id in ``sub`` and an ``exp`` claim. There is no
server-side session or revocation list: a token is valid until it expires.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from gosmooth.config import get_settings
from gosmooth.errors import InternalError


class InvalidTokenError(Exception):
    """Token is malformed, badly signed, signed with another algorithm, or expired."""


def issue_token(user_id: str, remember_me: bool = False) -> str:
    """
    Create a signed token for ``user_id``.

    Args:
        user_id: The user's storage id as a string.
        remember_me: Extend the lifetime from 24 hours to 7 days.

    Returns:
        Encoded JWT string.
    """
    settings = get_settings()
    now = datetime.now(timezone.utc)
    lifetime = (
        timedelta(days=settings.jwt_remember_me_days)
        if remember_me
        else timedelta(hours=settings.jwt_expire_hours)
    )
    payload: dict[str, Any] = {
        "sub": user_id,
        "iat": now,
        "exp": now + lifetime,
    }
    try:
        return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    except (jwt.PyJWTError, TypeError, ValueError) as e:
        raise InternalError("failed to generate token") from e


def validate_token(token: str) -> dict[str, Any]:
    """
    Verify and decode a token.

    Only the configured HMAC algorithm is accepted. Expired, malformed and
    badly signed tokens all raise the same InvalidTokenError.
    """
    settings = get_settings()
    try:
        payload: dict[str, Any] = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "sub"]},
        )
    except jwt.PyJWTError as e:
        raise InvalidTokenError(str(e)) from e

    if not isinstance(payload.get("sub"), str) or not payload["sub"]:
        msg = "Token subject is missing"
        raise InvalidTokenError(msg)
    return payload
