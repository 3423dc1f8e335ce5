"""Profile router: /api/profile."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from gosmooth.auth.dependencies import get_current_user
from gosmooth.auth.schemas import UserEnvelope, UserResponse
from gosmooth.database import get_session
from gosmooth.db.models import User
from gosmooth.users.schemas import ProfileUpdateRequest, ProfileUpdateResponse
from gosmooth.users.service import update_profile

router = APIRouter(prefix="/api", tags=["Users"])


@router.get("/profile", response_model=UserEnvelope)
async def get_profile(user: User = Depends(get_current_user)) -> UserEnvelope:
    """Get own profile."""
    return UserEnvelope(user=UserResponse.model_validate(user))


@router.put("/profile", response_model=ProfileUpdateResponse)
async def put_profile(
    body: ProfileUpdateRequest,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> ProfileUpdateResponse:
    """Update name and/or address."""
    user = await update_profile(db, user, body)
    return ProfileUpdateResponse(user=UserResponse.model_validate(user))
