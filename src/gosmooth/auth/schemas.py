"""Request/response schemas for authentication and user records."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field, field_validator


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


class Address(BaseModel):
    """Postal address attached to a user. Every field is optional."""

    model_config = ConfigDict(populate_by_name=True)

    address_line: str | None = Field(
        None, alias="addressLine", validation_alias=AliasChoices("addressLine", "address_line")
    )
    city: str | None = None
    province: str | None = None
    zipcode: str | None = None
    country: str | None = None
    lat: float | None = None
    lng: float | None = None

    def to_document(self) -> dict[str, Any]:
        """Dict form stored in the ``users.address`` JSON column."""
        return self.model_dump(by_alias=True, exclude_none=True)


class UserResponse(BaseModel):
    """User record as returned by the API. The password hash is never included."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    name: str
    role: str
    status: str
    ban_reason: str | None = None
    address: Address | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v: Any) -> str:
        return v.hex if isinstance(v, uuid.UUID) else str(v)

    @field_validator("ban_reason", mode="before")
    @classmethod
    def blank_reason_is_none(cls, v: str | None) -> str | None:
        return v or None


class UserEnvelope(BaseModel):
    user: UserResponse


# ---------------------------------------------------------------------------
# Registration / login
# ---------------------------------------------------------------------------


class RegisterRequest(BaseModel):
    """Self-registration. Role and status are always assigned server-side."""

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)
    name: str = Field(..., min_length=1, max_length=128)
    address: Address | None = None

    @field_validator("email")
    @classmethod
    def strip_email(cls, v: str) -> str:
        """Trim surrounding whitespace. The local part keeps its case; the domain is lowercased."""
        return v.strip()


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)
    remember_me: bool = Field(False, validation_alias=AliasChoices("remember_me", "rememberMe"))

    @field_validator("email")
    @classmethod
    def strip_email(cls, v: str) -> str:
        return v.strip()


class ChangePasswordRequest(BaseModel):
    """Change password (requires current password)."""

    current_password: str = Field(
        ..., min_length=1, max_length=128, validation_alias=AliasChoices("currentPassword", "current_password")
    )
    new_password: str = Field(
        ..., min_length=1, max_length=128, validation_alias=AliasChoices("newPassword", "new_password")
    )


class TokenResponse(BaseModel):
    """Returned by login: a bearer token plus the sanitized user."""

    token: str
    user: UserResponse


class RegisterResponse(TokenResponse):
    message: str = "User registered successfully"


class TokenOnlyResponse(BaseModel):
    token: str


class MessageResponse(BaseModel):
    message: str
