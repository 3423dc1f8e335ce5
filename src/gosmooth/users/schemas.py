"""Request/response schemas for user endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from gosmooth.auth.schemas import Address, UserResponse


class ProfileUpdateRequest(BaseModel):
    """Self-service profile patch. Only fields that are sent are applied."""

    name: str | None = Field(None, min_length=1, max_length=128)
    address: Address | None = None


class ProfileUpdateResponse(BaseModel):
    message: str = "profile updated successfully"
    user: UserResponse


class AdminUserUpdateRequest(BaseModel):
    """Admin patch for another account. Only fields that are sent are applied."""

    name: str | None = Field(None, min_length=1, max_length=128)
    role: Literal["user", "admin"] | None = None
    status: Literal["active", "banned"] | None = None
    ban_reason: str | None = None


class BanRequest(BaseModel):
    reason: str = ""


class UserListResponse(BaseModel):
    users: list[UserResponse]
