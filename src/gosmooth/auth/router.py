"""Authentication router: all /api/auth/* endpoints."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from gosmooth.auth.dependencies import TOKEN_COOKIE, get_current_user, get_current_user_id
from gosmooth.auth.jwt import issue_token
from gosmooth.auth.schemas import (
    ChangePasswordRequest,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    RegisterResponse,
    TokenOnlyResponse,
    TokenResponse,
    UserResponse,
)
from gosmooth.auth.service import authenticate_user, change_password, register_user
from gosmooth.config import get_settings
from gosmooth.database import get_session
from gosmooth.db.models import User

logger = structlog.get_logger()

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


@router.post("/register", response_model=RegisterResponse, status_code=201)
async def register(
    body: RegisterRequest,
    db: AsyncSession = Depends(get_session),
) -> RegisterResponse:
    """Register with email + password. Role is always 'user'."""
    settings = get_settings()
    user = await register_user(
        db,
        email=body.email,
        password=body.password,
        name=body.name,
        address=body.address.to_document() if body.address else None,
        policy=settings.password_policy,
    )
    return RegisterResponse(
        token=issue_token(user.id.hex),
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=TokenResponse)
async def login(
    body: LoginRequest,
    db: AsyncSession = Depends(get_session),
) -> TokenResponse:
    """Login with email + password; banned accounts get their ban reason back."""
    user = await authenticate_user(db, body.email, body.password)
    logger.info("user_logged_in", user_id=user.id.hex, remember_me=body.remember_me)
    return TokenResponse(
        token=issue_token(user.id.hex, remember_me=body.remember_me),
        user=UserResponse.model_validate(user),
    )


@router.post("/change-password", response_model=MessageResponse)
async def change_password_endpoint(
    body: ChangePasswordRequest,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> MessageResponse:
    """Change password (requires the current one)."""
    settings = get_settings()
    await change_password(
        db,
        user,
        current_password=body.current_password,
        new_password=body.new_password,
        policy=settings.password_policy,
    )
    return MessageResponse(message="Password changed successfully")


@router.post("/refresh", response_model=TokenOnlyResponse)
async def refresh(user_id: str = Depends(get_current_user_id)) -> TokenOnlyResponse:
    """Issue a fresh long-lived token for the current caller."""
    return TokenOnlyResponse(token=issue_token(user_id, remember_me=True))


@router.post("/logout", response_model=MessageResponse)
async def logout(
    response: Response,
    user_id: str = Depends(get_current_user_id),
) -> MessageResponse:
    """Client-side logout. The token stays valid until it expires."""
    response.delete_cookie(TOKEN_COOKIE)
    logger.info("user_logged_out", user_id=user_id)
    return MessageResponse(message="logged out successfully")
