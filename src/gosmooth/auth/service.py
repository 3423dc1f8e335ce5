"""
Authentication business logic.

Handles user lookup, registration, credential checks and password changes.
"""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING, Any

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from gosmooth.auth.password import (
    PasswordPolicy,
    check_password_policy,
    hash_password,
    verify_password,
)
from gosmooth.db.models import ROLE_USER, STATUS_ACTIVE, STATUS_BANNED, User, utcnow
from gosmooth.errors import BadRequestError, ConflictError, ForbiddenError, UnauthorizedError
from gosmooth.identifiers import try_parse_storage_id

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

logger = structlog.get_logger()

DUPLICATE_EMAIL = "Email already exists"
INVALID_CREDENTIALS = "invalid credentials"


# ---------------------------------------------------------------------------
# User queries
# ---------------------------------------------------------------------------


async def get_user_by_id(db: AsyncSession, user_id: str | uuid.UUID) -> User | None:
    """Fetch a user by storage id. Returns None for ids that are not valid UUIDs."""
    parsed = user_id if isinstance(user_id, uuid.UUID) else try_parse_storage_id(user_id)
    if parsed is None:
        return None
    result = await db.execute(select(User).where(User.id == parsed))
    return result.scalar_one_or_none()


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    """Fetch a user by email, compared exactly as stored."""
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------


async def register_user(
    db: AsyncSession,
    email: str,
    password: str,
    name: str,
    address: dict[str, Any] | None,
    policy: PasswordPolicy,
) -> User:
    """
    Register a new account with role 'user' and status 'active'.

    The email lookup runs before the insert, but two concurrent registrations
    can both pass it; the loser then trips the unique index on commit and gets
    the same duplicate-email error.

    Raises:
        ConflictError: If the email is already registered.
        BadRequestError: If the password fails the active policy.
    """
    if await get_user_by_email(db, email) is not None:
        raise ConflictError(DUPLICATE_EMAIL)

    try:
        check_password_policy(password, policy)
    except ValueError as e:
        raise BadRequestError(str(e)) from e

    now = utcnow()
    user = User(
        email=email,
        password_hash=hash_password(password),
        name=name,
        role=ROLE_USER,
        status=STATUS_ACTIVE,
        address=address,
        created_at=now,
        updated_at=now,
    )
    db.add(user)
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        logger.info("registration_duplicate_email_race", email=email)
        raise ConflictError(DUPLICATE_EMAIL) from e

    logger.info("user_registered", user_id=user.id.hex, email=email)
    return user


# ---------------------------------------------------------------------------
# Login
# ---------------------------------------------------------------------------


async def authenticate_user(db: AsyncSession, email: str, password: str) -> User:
    """
    Check credentials and account status.

    Raises:
        UnauthorizedError: Unknown email or wrong password.
        ForbiddenError: Correct password but the account is banned or otherwise not active.
    """
    user = await get_user_by_email(db, email)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("login_failed", email=email)
        raise UnauthorizedError(INVALID_CREDENTIALS)

    if user.status == STATUS_BANNED:
        logger.info("login_rejected_banned", user_id=user.id.hex)
        raise ForbiddenError("Your account has been banned", banReason=user.ban_reason or "")
    if user.status != STATUS_ACTIVE:
        logger.info("login_rejected_inactive", user_id=user.id.hex, status=user.status)
        raise ForbiddenError("Your account is not active")

    return user


# ---------------------------------------------------------------------------
# Password change
# ---------------------------------------------------------------------------


async def change_password(
    db: AsyncSession,
    user: User,
    current_password: str,
    new_password: str,
    policy: PasswordPolicy,
) -> None:
    """
    Replace the stored hash after checking the current password.

    Raises:
        BadRequestError: Current password is wrong or the new one fails the policy.
    """
    if not verify_password(current_password, user.password_hash):
        raise BadRequestError("current password is incorrect")

    try:
        check_password_policy(new_password, policy)
    except ValueError as e:
        raise BadRequestError(str(e)) from e

    user.password_hash = hash_password(new_password)
    user.updated_at = utcnow()
    await db.commit()
    logger.info("password_changed", user_id=user.id.hex)
