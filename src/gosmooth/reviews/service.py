"""
Review business logic.

Covers review CRUD, nested comments, like toggles on reviews and comments,
and review reports. Every liked-by list is replaced rather than mutated in
place so the JSON column change is flushed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from gosmooth.auth.ownership import ensure_can_modify
from gosmooth.db.models import REPORT_PENDING, Comment, Place, Review, ReviewReport, User, utcnow
from gosmooth.errors import NotFoundError
from gosmooth.identifiers import parse_storage_id
from gosmooth.places.service import find_place

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from gosmooth.reviews.schemas import (
        ReportCreateRequest,
        ReviewCreateRequest,
        ReviewUpdateRequest,
    )

logger = structlog.get_logger()


# ---------------------------------------------------------------------------
# Likes
# ---------------------------------------------------------------------------


def toggle_like(target: Review | Comment, user_id: str) -> bool:
    """
    Flip ``user_id``'s like on a review or comment.

    Returns True if the target is now liked by the user. ``likes`` always
    ends equal to ``len(liked_by)``.
    """
    liked_by = list(target.liked_by or [])
    if user_id in liked_by:
        liked_by = [uid for uid in liked_by if uid != user_id]
        now_liked = False
    else:
        liked_by.append(user_id)
        now_liked = True
    target.liked_by = liked_by
    target.likes = len(liked_by)
    return now_liked


# ---------------------------------------------------------------------------
# Reviews
# ---------------------------------------------------------------------------


async def get_review_or_404(db: AsyncSession, raw_id: str) -> Review:
    review = await db.get(Review, parse_storage_id(raw_id, "review"))
    if review is None:
        raise NotFoundError("review not found")
    return review


async def _lookup_place_name(db: AsyncSession, place_id: str) -> str:
    """Best-effort place name for a new review; empty if the lookup fails."""
    try:
        place = await find_place(db, place_id)
    except SQLAlchemyError:
        logger.warning("review_place_lookup_failed", place_id=place_id, exc_info=True)
        await db.rollback()
        return ""
    return place.name if place is not None else ""


async def create_review(db: AsyncSession, author: User, body: ReviewCreateRequest) -> Review:
    """Create a review, capturing the author's name and the place name."""
    place_name = body.place_name or await _lookup_place_name(db, body.place_id)
    now = utcnow()
    review = Review(
        user_id=author.id.hex,
        username=author.name,
        place_id=body.place_id,
        place_name=place_name,
        rating=body.rating,
        comment=body.comment,
        likes=0,
        liked_by=[],
        comments=[],
        created_at=now,
        updated_at=now,
    )
    db.add(review)
    await db.commit()
    logger.info("review_created", review_id=review.id.hex, place_id=review.place_id, rating=review.rating)
    return review


async def list_reviews(db: AsyncSession, place_id: str | None = None) -> list[Review]:
    """
    List reviews, optionally for one place.

    Reviews stored without a place name get one from the places table for
    display; the stored row is not changed.
    """
    stmt = select(Review).order_by(Review.created_at)
    if place_id:
        stmt = stmt.where(Review.place_id == place_id)
    reviews = list((await db.execute(stmt)).scalars().all())

    if any(not r.place_name for r in reviews):
        rows = await db.execute(select(Place.place_id, Place.name))
        names = {pid: name for pid, name in rows.all() if pid}
        for review in reviews:
            if not review.place_name:
                db.expunge(review)
                review.place_name = names.get(review.place_id, "")
    return reviews


async def update_review(db: AsyncSession, caller: User, raw_id: str, body: ReviewUpdateRequest) -> Review:
    review = await get_review_or_404(db, raw_id)
    ensure_can_modify(caller, review.user_id, "review")
    review.rating = body.rating
    review.comment = body.comment
    review.updated_at = utcnow()
    await db.commit()
    logger.info("review_updated", review_id=review.id.hex, by=caller.id.hex)
    return review


async def delete_review(db: AsyncSession, caller: User, raw_id: str) -> None:
    review = await get_review_or_404(db, raw_id)
    ensure_can_modify(caller, review.user_id, "review")
    await db.delete(review)
    await db.commit()
    logger.info("review_deleted", review_id=review.id.hex, by=caller.id.hex)


async def toggle_review_like(db: AsyncSession, raw_id: str, user_id: str) -> Review:
    review = await get_review_or_404(db, raw_id)
    liked = toggle_like(review, user_id)
    await db.commit()
    logger.info("review_like_toggled", review_id=review.id.hex, user_id=user_id, liked=liked)
    return review


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------


async def add_comment(db: AsyncSession, author: User, raw_id: str, text: str) -> Comment:
    review = await get_review_or_404(db, raw_id)
    comment = Comment(
        review_id=review.id,
        user_id=author.id.hex,
        username=author.name,
        text=text,
        likes=0,
        liked_by=[],
        created_at=utcnow(),
    )
    review.comments.append(comment)
    await db.commit()
    logger.info("comment_added", review_id=review.id.hex, comment_id=comment.id.hex)
    return comment


async def toggle_comment_like(db: AsyncSession, raw_review_id: str, raw_comment_id: str, user_id: str) -> Comment:
    review_id = parse_storage_id(raw_review_id, "review")
    comment_id = parse_storage_id(raw_comment_id, "comment")
    review = await db.get(Review, review_id)
    if review is None:
        raise NotFoundError("review not found")
    comment = next((c for c in review.comments if c.id == comment_id), None)
    if comment is None:
        raise NotFoundError("comment not found")
    liked = toggle_like(comment, user_id)
    await db.commit()
    logger.info("comment_like_toggled", comment_id=comment.id.hex, user_id=user_id, liked=liked)
    return comment


# ---------------------------------------------------------------------------
# Reports
# ---------------------------------------------------------------------------


async def report_review(db: AsyncSession, reporter_id: str, raw_id: str, body: ReportCreateRequest) -> ReviewReport:
    review = await get_review_or_404(db, raw_id)
    report = ReviewReport(
        review_id=review.id.hex,
        reporter_id=reporter_id,
        type=body.type,
        detail=body.detail,
        status=REPORT_PENDING,
        created_at=utcnow(),
    )
    db.add(report)
    await db.commit()
    logger.info("review_reported", review_id=review.id.hex, report_id=report.id.hex, type=body.type)
    return report


async def list_reports(db: AsyncSession, status: str | None = None) -> list[ReviewReport]:
    stmt = select(ReviewReport).order_by(ReviewReport.created_at)
    if status:
        stmt = stmt.where(ReviewReport.status == status)
    return list((await db.execute(stmt)).scalars().all())


async def set_report_status(db: AsyncSession, raw_id: str, status: str) -> ReviewReport:
    report = await db.get(ReviewReport, parse_storage_id(raw_id, "report"))
    if report is None:
        raise NotFoundError("report not found")
    report.status = status
    report.resolved_at = utcnow()
    await db.commit()
    logger.info("report_status_updated", report_id=report.id.hex, status=status)
    return report
