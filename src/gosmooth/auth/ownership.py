"""Owner-or-admin check for user-owned records (reviews, route suggestions)."""

from __future__ import annotations

import structlog

from gosmooth.config import get_settings
from gosmooth.db.models import ROLE_ADMIN, User
from gosmooth.errors import ForbiddenError

logger = structlog.get_logger()


def ensure_can_modify(caller: User, owner_id: str, what: str) -> None:
    """
    Reject a modification of someone else's record.

    Only active when ``Settings.enforce_ownership`` is on. With it off (the
    default) any authenticated user may modify any record.
    """
    if not get_settings().enforce_ownership:
        return
    if caller.role == ROLE_ADMIN or caller.id.hex == owner_id:
        return
    logger.info("ownership_denied", user_id=caller.id.hex, owner_id=owner_id, target=what)
    raise ForbiddenError(f"you can only modify your own {what}")
