"""FastAPI authentication and authorization dependencies."""

from __future__ import annotations

import structlog
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from gosmooth.auth.jwt import InvalidTokenError, validate_token
from gosmooth.auth.service import get_user_by_id
from gosmooth.database import get_session
from gosmooth.db.models import ROLE_ADMIN, User
from gosmooth.errors import ForbiddenError, UnauthorizedError

logger = structlog.get_logger()

TOKEN_COOKIE = "token"


def extract_token(request: Request) -> str | None:
    """
    Find the bearer token for a request.

    A well-formed ``Authorization: Bearer <token>`` header wins; otherwise the
    ``token`` cookie is used.
    """
    header = request.headers.get("Authorization", "")
    parts = header.split(" ")
    if len(parts) == 2 and parts[0] == "Bearer" and parts[1]:
        return parts[1]
    cookie = request.cookies.get(TOKEN_COOKIE)
    return cookie or None


async def get_current_user_id(request: Request) -> str:
    """
    Validate the request's token and return the user id it carries.

    No database read happens here; validity depends only on the signature and
    expiry. Raises 401 on a missing or invalid token.
    """
    token = extract_token(request)
    if token is None:
        raise UnauthorizedError("authorization token required")
    try:
        payload = validate_token(token)
    except InvalidTokenError as e:
        logger.debug("token_rejected", reason=str(e))
        raise UnauthorizedError("invalid token") from e
    user_id: str = payload["sub"]
    request.state.user_id = user_id
    return user_id


async def get_current_user(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
) -> User:
    """Resolve the token's user record. 401 if it no longer exists."""
    user = await get_user_by_id(db, user_id)
    if user is None:
        raise UnauthorizedError("user not found")
    return user


async def require_admin(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
) -> User:
    """
    Require the caller to be an admin.

    Loads the user on every call (no caching). A failed load or a non-admin
    role both give 403.
    """
    user = await get_user_by_id(db, user_id)
    if user is None or user.role != ROLE_ADMIN:
        logger.info("admin_access_denied", user_id=user_id)
        raise ForbiddenError("admin access required")
    return user
