"""Request/response schemas for reviews, comments, likes and reports."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

MIN_RATING = 1
MAX_RATING = 5


def _hex(v: Any) -> str:
    return v.hex if isinstance(v, uuid.UUID) else str(v)


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class CommentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    username: str
    text: str
    likes: int
    liked_by: list[str]
    created_at: datetime | None = None

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v: Any) -> str:
        return _hex(v)


class ReviewResponse(BaseModel):
    """
    Review as returned by the API.

    ``username`` and ``placeName`` are the values captured when the review was
    written; they are not refreshed if the user or place is renamed later.
    """

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    user_id: str
    username: str
    place_id: str = Field(alias="placeId")
    place_name: str = Field("", alias="placeName")
    rating: int
    comment: str
    likes: int
    liked_by: list[str]
    comments: list[CommentResponse] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v: Any) -> str:
        return _hex(v)


class ReviewEnvelope(BaseModel):
    review: ReviewResponse


class ReviewListResponse(BaseModel):
    reviews: list[ReviewResponse]


class ReviewCreatedResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str = "review created successfully"
    id: str
    place_name: str = Field("", alias="placeName")
    review: ReviewResponse


class CommentCreatedResponse(BaseModel):
    message: str = "comment added"
    comment: CommentResponse


class LikeToggleResponse(BaseModel):
    message: str = "like toggled"
    liked: bool
    likes: int


class ReportResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    review_id: str
    reporter_id: str
    type: str
    detail: str
    status: str
    created_at: datetime | None = None
    resolved_at: datetime | None = None

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v: Any) -> str:
        return _hex(v)


class ReportEnvelope(BaseModel):
    message: str = "review reported"
    report: ReportResponse


class ReportListResponse(BaseModel):
    reports: list[ReportResponse]


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class ReviewCreateRequest(BaseModel):
    place_id: str = Field(..., min_length=1, validation_alias=AliasChoices("placeId", "place_id"))
    place_name: str = Field("", validation_alias=AliasChoices("placeName", "place_name"))
    rating: int = Field(..., ge=MIN_RATING, le=MAX_RATING)
    comment: str = Field(..., min_length=1, max_length=5000)


class ReviewUpdateRequest(BaseModel):
    """Only rating and comment may change after creation."""

    rating: int = Field(..., ge=MIN_RATING, le=MAX_RATING)
    comment: str = Field(..., min_length=1, max_length=5000)


class CommentCreateRequest(BaseModel):
    text: str = Field(..., min_length=1, max_length=2000)


class ReportCreateRequest(BaseModel):
    type: str = Field(..., min_length=1, max_length=64)
    detail: str = Field("", max_length=2000)


class ReportStatusRequest(BaseModel):
    status: str = Field(..., min_length=1, max_length=32)
