"""Reviews router: /api/reviews and its comments, likes and reports."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from gosmooth.auth.dependencies import get_current_user, get_current_user_id
from gosmooth.auth.schemas import MessageResponse
from gosmooth.database import get_session
from gosmooth.db.models import User
from gosmooth.reviews.schemas import (
    CommentCreatedResponse,
    CommentCreateRequest,
    CommentResponse,
    LikeToggleResponse,
    ReportCreateRequest,
    ReportEnvelope,
    ReportResponse,
    ReviewCreatedResponse,
    ReviewCreateRequest,
    ReviewEnvelope,
    ReviewListResponse,
    ReviewResponse,
    ReviewUpdateRequest,
)
from gosmooth.reviews.service import (
    add_comment,
    create_review,
    delete_review,
    get_review_or_404,
    list_reviews,
    report_review,
    toggle_comment_like,
    toggle_review_like,
    update_review,
)

router = APIRouter(prefix="/api/reviews", tags=["Reviews"])


@router.get("", response_model=ReviewListResponse)
async def get_reviews(
    place_id: str | None = Query(None, alias="placeId"),
    db: AsyncSession = Depends(get_session),
) -> ReviewListResponse:
    """List reviews, optionally filtered by external place id."""
    reviews = await list_reviews(db, place_id)
    return ReviewListResponse(reviews=[ReviewResponse.model_validate(r) for r in reviews])


@router.post("", response_model=ReviewCreatedResponse, status_code=201)
async def post_review(
    body: ReviewCreateRequest,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> ReviewCreatedResponse:
    review = await create_review(db, user, body)
    return ReviewCreatedResponse(
        id=review.id.hex,
        place_name=review.place_name,
        review=ReviewResponse.model_validate(review),
    )


@router.get("/{review_id}", response_model=ReviewEnvelope)
async def get_review(
    review_id: str,
    _user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
) -> ReviewEnvelope:
    review = await get_review_or_404(db, review_id)
    return ReviewEnvelope(review=ReviewResponse.model_validate(review))


@router.put("/{review_id}", response_model=ReviewEnvelope)
async def put_review(
    review_id: str,
    body: ReviewUpdateRequest,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> ReviewEnvelope:
    """Update rating and comment."""
    review = await update_review(db, user, review_id, body)
    return ReviewEnvelope(review=ReviewResponse.model_validate(review))


@router.delete("/{review_id}", response_model=MessageResponse)
async def remove_review(
    review_id: str,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> MessageResponse:
    await delete_review(db, user, review_id)
    return MessageResponse(message="review deleted successfully")


@router.post("/{review_id}/like", response_model=LikeToggleResponse)
async def like_review(
    review_id: str,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
) -> LikeToggleResponse:
    """Toggle the caller's like on a review."""
    review = await toggle_review_like(db, review_id, user_id)
    return LikeToggleResponse(liked=user_id in review.liked_by, likes=review.likes)


@router.post("/{review_id}/comments", response_model=CommentCreatedResponse, status_code=201)
async def post_comment(
    review_id: str,
    body: CommentCreateRequest,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> CommentCreatedResponse:
    comment = await add_comment(db, user, review_id, body.text)
    return CommentCreatedResponse(comment=CommentResponse.model_validate(comment))


@router.post("/{review_id}/comments/{comment_id}/like", response_model=LikeToggleResponse)
async def like_comment(
    review_id: str,
    comment_id: str,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
) -> LikeToggleResponse:
    """Toggle the caller's like on a comment."""
    comment = await toggle_comment_like(db, review_id, comment_id, user_id)
    return LikeToggleResponse(liked=user_id in comment.liked_by, likes=comment.likes)


@router.post("/{review_id}/report", response_model=ReportEnvelope, status_code=201)
async def post_report(
    review_id: str,
    body: ReportCreateRequest,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
) -> ReportEnvelope:
    """Flag a review for moderation."""
    report = await report_review(db, user_id, review_id, body)
    return ReportEnvelope(report=ReportResponse.model_validate(report))
