"""Admin router: everything under /api/admin requires role 'admin'."""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, Query, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from gosmooth.admin.schemas import ImageType, StatsResponse, UploadResponse
from gosmooth.admin.service import MAX_UPLOAD_BYTES, collect_stats, save_image
from gosmooth.auth.dependencies import require_admin
from gosmooth.auth.schemas import MessageResponse, UserEnvelope, UserResponse
from gosmooth.config import get_settings
from gosmooth.database import get_session
from gosmooth.places.schemas import PlaceCreate, PlaceEnvelope, PlaceListResponse, PlacePatch
from gosmooth.places.service import create_place, delete_place, list_places, update_place
from gosmooth.reviews.schemas import ReportListResponse, ReportResponse, ReportStatusRequest
from gosmooth.reviews.service import list_reports, set_report_status
from gosmooth.users.schemas import AdminUserUpdateRequest, BanRequest, UserListResponse
from gosmooth.users.service import (
    admin_update_user,
    ban_user,
    delete_user,
    get_user_or_404,
    list_users,
    unban_user,
)

router = APIRouter(prefix="/api/admin", tags=["Admin"], dependencies=[Depends(require_admin)])


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


@router.get("/users", response_model=UserListResponse)
async def get_users(db: AsyncSession = Depends(get_session)) -> UserListResponse:
    users = await list_users(db)
    return UserListResponse(users=[UserResponse.model_validate(u) for u in users])


@router.get("/users/{user_id}", response_model=UserEnvelope)
async def get_user(user_id: str, db: AsyncSession = Depends(get_session)) -> UserEnvelope:
    return UserEnvelope(user=UserResponse.model_validate(await get_user_or_404(db, user_id)))


@router.put("/users/{user_id}", response_model=UserEnvelope)
async def put_user(
    user_id: str,
    body: AdminUserUpdateRequest,
    db: AsyncSession = Depends(get_session),
) -> UserEnvelope:
    user = await admin_update_user(db, user_id, body)
    return UserEnvelope(user=UserResponse.model_validate(user))


@router.delete("/users/{user_id}", response_model=MessageResponse)
async def remove_user(user_id: str, db: AsyncSession = Depends(get_session)) -> MessageResponse:
    await delete_user(db, user_id)
    return MessageResponse(message="user deleted successfully")


@router.post("/users/{user_id}/ban", response_model=MessageResponse)
async def ban(user_id: str, body: BanRequest, db: AsyncSession = Depends(get_session)) -> MessageResponse:
    """Ban an account. The reason is shown to the user at login."""
    await ban_user(db, user_id, body.reason)
    return MessageResponse(message="user banned")


@router.post("/users/{user_id}/unban", response_model=MessageResponse)
async def unban(user_id: str, db: AsyncSession = Depends(get_session)) -> MessageResponse:
    await unban_user(db, user_id)
    return MessageResponse(message="user unbanned")


# ---------------------------------------------------------------------------
# Places
# ---------------------------------------------------------------------------


@router.get("/places", response_model=PlaceListResponse)
async def get_places(db: AsyncSession = Depends(get_session)) -> PlaceListResponse:
    return PlaceListResponse(places=await list_places(db))


@router.post("/places", response_model=PlaceEnvelope, status_code=201)
async def post_place(body: PlaceCreate, db: AsyncSession = Depends(get_session)) -> PlaceEnvelope:
    return PlaceEnvelope(place=await create_place(db, body))


@router.put("/places/{place_id}", response_model=PlaceEnvelope)
async def put_place(place_id: str, body: PlacePatch, db: AsyncSession = Depends(get_session)) -> PlaceEnvelope:
    """Patch a place by storage id."""
    return PlaceEnvelope(place=await update_place(db, place_id, body))


@router.delete("/places/{place_id}", response_model=MessageResponse)
async def remove_place(place_id: str, db: AsyncSession = Depends(get_session)) -> MessageResponse:
    await delete_place(db, place_id)
    return MessageResponse(message="place deleted successfully")


# ---------------------------------------------------------------------------
# Dashboard & uploads
# ---------------------------------------------------------------------------


@router.get("/stats", response_model=StatsResponse)
async def stats(db: AsyncSession = Depends(get_session)) -> StatsResponse:
    return StatsResponse(**await collect_stats(db))


@router.post("/upload-image", response_model=UploadResponse)
async def upload_image(
    image: UploadFile = File(...),
    img_type: ImageType = Query("cover", alias="imgType"),
) -> UploadResponse:
    """Store a cover or highlight image and return its relative URL."""
    # One byte past the limit is enough to reject an oversized file.
    content = await image.read(MAX_UPLOAD_BYTES + 1)
    url = await save_image(get_settings().upload_dir, img_type, image.filename or "image", content)
    return UploadResponse(image_url=url)


# ---------------------------------------------------------------------------
# Review reports
# ---------------------------------------------------------------------------


@router.get("/review-reports", response_model=ReportListResponse)
async def get_reports(
    status: str | None = Query(None),
    db: AsyncSession = Depends(get_session),
) -> ReportListResponse:
    reports = await list_reports(db, status)
    return ReportListResponse(reports=[ReportResponse.model_validate(r) for r in reports])


@router.patch("/review-reports/{report_id}/status", response_model=MessageResponse)
async def patch_report_status(
    report_id: str,
    body: ReportStatusRequest,
    db: AsyncSession = Depends(get_session),
) -> MessageResponse:
    await set_report_status(db, report_id, body.status)
    return MessageResponse(message="report status updated")
