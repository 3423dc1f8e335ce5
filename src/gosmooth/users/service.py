"""User management business logic (self-service and admin)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from sqlalchemy import select

from gosmooth.db.models import STATUS_ACTIVE, STATUS_BANNED, User, utcnow
from gosmooth.errors import NotFoundError
from gosmooth.identifiers import parse_storage_id

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from gosmooth.users.schemas import AdminUserUpdateRequest, ProfileUpdateRequest

logger = structlog.get_logger()


async def update_profile(db: AsyncSession, user: User, patch: ProfileUpdateRequest) -> User:
    """Apply the fields present in ``patch`` (name, address) to the caller's record."""
    fields = patch.model_fields_set
    if "name" in fields and patch.name is not None:
        user.name = patch.name
    if "address" in fields:
        user.address = patch.address.to_document() if patch.address else None
    user.updated_at = utcnow()
    await db.commit()
    logger.info("profile_updated", user_id=user.id.hex, fields=sorted(fields))
    return user


async def list_users(db: AsyncSession) -> list[User]:
    result = await db.execute(select(User).order_by(User.created_at))
    return list(result.scalars().all())


async def get_user_or_404(db: AsyncSession, raw_id: str) -> User:
    """Load a user by a storage id from the URL. 400 on bad format, 404 on miss."""
    user_id = parse_storage_id(raw_id, "user")
    user = await db.get(User, user_id)
    if user is None:
        raise NotFoundError("user not found")
    return user


async def admin_update_user(db: AsyncSession, raw_id: str, patch: AdminUserUpdateRequest) -> User:
    """Apply an admin patch (name, role, status, ban_reason)."""
    user = await get_user_or_404(db, raw_id)
    fields = patch.model_fields_set
    if "name" in fields and patch.name is not None:
        user.name = patch.name
    if "role" in fields and patch.role is not None:
        user.role = patch.role
    if "status" in fields and patch.status is not None:
        user.status = patch.status
        if patch.status == STATUS_ACTIVE and "ban_reason" not in fields:
            user.ban_reason = None
    if "ban_reason" in fields:
        user.ban_reason = patch.ban_reason or None
    user.updated_at = utcnow()
    await db.commit()
    logger.info("user_updated_by_admin", user_id=user.id.hex, fields=sorted(fields))
    return user


async def delete_user(db: AsyncSession, raw_id: str) -> None:
    """Hard-delete a user. Their reviews and suggestions are left in place."""
    user = await get_user_or_404(db, raw_id)
    await db.delete(user)
    await db.commit()
    logger.info("user_deleted", user_id=user.id.hex)


async def ban_user(db: AsyncSession, raw_id: str, reason: str) -> User:
    user = await get_user_or_404(db, raw_id)
    user.status = STATUS_BANNED
    user.ban_reason = reason
    user.updated_at = utcnow()
    await db.commit()
    logger.info("user_banned", user_id=user.id.hex)
    return user


async def unban_user(db: AsyncSession, raw_id: str) -> User:
    user = await get_user_or_404(db, raw_id)
    user.status = STATUS_ACTIVE
    user.ban_reason = None
    user.updated_at = utcnow()
    await db.commit()
    logger.info("user_unbanned", user_id=user.id.hex)
    return user
