"""Admin dashboard stats and image uploads."""

from __future__ import annotations

import os
import time
import uuid
from pathlib import Path
from typing import TYPE_CHECKING

import structlog
from sqlalchemy import func, select
from starlette.concurrency import run_in_threadpool

from gosmooth.db.models import Review, RouteSuggestion, User, utcnow
from gosmooth.errors import BadRequestError

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from gosmooth.admin.schemas import ImageType

logger = structlog.get_logger()

MAX_UPLOAD_BYTES = 5 * 1024 * 1024

IMAGE_DIRS: dict[str, str] = {
    "cover": "CoverImage",
    "highlight": "HighlightImages",
}


async def collect_stats(db: AsyncSession) -> dict:
    """Row counts for the dashboard. ``total_routes`` counts route suggestions."""
    users = await db.scalar(select(func.count()).select_from(User))
    reviews = await db.scalar(select(func.count()).select_from(Review))
    routes = await db.scalar(select(func.count()).select_from(RouteSuggestion))
    return {
        "total_users": users or 0,
        "total_reviews": reviews or 0,
        "total_routes": routes or 0,
        "last_updated": utcnow(),
    }


def unique_image_name(filename: str, now: float | None = None) -> str:
    """
    Build ``<base>-<unix seconds>-<uuid><ext>`` from an uploaded file name.

    Any directory part of ``filename`` is discarded.
    """
    base, ext = os.path.splitext(Path(filename).name)
    stamp = int(now if now is not None else time.time())
    return f"{base or 'image'}-{stamp}-{uuid.uuid4()}{ext}"


def _write_file(path: Path, content: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)


async def save_image(upload_root: str, img_type: ImageType, filename: str, content: bytes) -> str:
    """Store an uploaded image and return its path relative to the server root."""
    if not content:
        raise BadRequestError("No file is received")
    if len(content) > MAX_UPLOAD_BYTES:
        raise BadRequestError("file too large", "Images are limited to 5MB")

    subdir = IMAGE_DIRS[img_type]
    name = unique_image_name(filename)
    target = Path(upload_root) / subdir / name
    await run_in_threadpool(_write_file, target, content)
    logger.info("image_uploaded", img_type=img_type, name=name, size=len(content))
    return f"uploads/{subdir}/{name}"
