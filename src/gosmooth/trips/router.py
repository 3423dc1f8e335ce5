"""Routes router: suggestions and cost estimates under /api/routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from gosmooth.auth.dependencies import get_current_user, get_current_user_id
from gosmooth.auth.schemas import MessageResponse
from gosmooth.database import get_session
from gosmooth.db.models import User
from gosmooth.trips.schemas import (
    CostEstimateResponse,
    CostQuery,
    RouteOption,
    SuggestionCreatedResponse,
    SuggestionEnvelope,
    SuggestionListResponse,
    SuggestionRequest,
    SuggestionResponse,
)
from gosmooth.trips.service import (
    create_suggestion,
    delete_suggestion,
    find_routes,
    get_suggestion_or_404,
    list_suggestions,
    update_suggestion,
)

router = APIRouter(prefix="/api/routes", tags=["Routes"])


@router.post("/suggest", response_model=SuggestionCreatedResponse, status_code=201)
async def suggest_route(
    body: SuggestionRequest,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
) -> SuggestionCreatedResponse:
    """Submit a route suggestion."""
    suggestion = await create_suggestion(db, user_id, body)
    return SuggestionCreatedResponse(
        id=suggestion.id.hex,
        suggestion=SuggestionResponse.model_validate(suggestion),
    )


@router.get("/suggestions", response_model=SuggestionListResponse)
async def get_suggestions(
    _user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
) -> SuggestionListResponse:
    suggestions = await list_suggestions(db)
    return SuggestionListResponse(suggestions=[SuggestionResponse.model_validate(s) for s in suggestions])


@router.get("/suggestions/{suggestion_id}", response_model=SuggestionEnvelope)
async def get_suggestion(
    suggestion_id: str,
    _user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
) -> SuggestionEnvelope:
    suggestion = await get_suggestion_or_404(db, suggestion_id)
    return SuggestionEnvelope(suggestion=SuggestionResponse.model_validate(suggestion))


@router.put("/suggestions/{suggestion_id}", response_model=SuggestionEnvelope)
async def put_suggestion(
    suggestion_id: str,
    body: SuggestionRequest,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> SuggestionEnvelope:
    suggestion = await update_suggestion(db, user, suggestion_id, body)
    return SuggestionEnvelope(suggestion=SuggestionResponse.model_validate(suggestion))


@router.delete("/suggestions/{suggestion_id}", response_model=MessageResponse)
async def remove_suggestion(
    suggestion_id: str,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> MessageResponse:
    await delete_suggestion(db, user, suggestion_id)
    return MessageResponse(message="route suggestion deleted successfully")


@router.get("/cost", response_model=CostEstimateResponse)
async def estimate_cost(
    start_location: str = Query(..., min_length=1),
    end_location: str = Query(..., min_length=1),
    distance: float | None = Query(None, ge=0),
    duration: int | None = Query(None, ge=0),
    _user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
) -> CostEstimateResponse:
    """Echo the query and list known routes between the two locations."""
    routes = await find_routes(db, start_location, end_location)
    options = [RouteOption.model_validate(r) for r in routes]
    return CostEstimateResponse(
        input=CostQuery(
            start_location=start_location,
            end_location=end_location,
            distance=distance,
            duration=duration,
        ),
        options=options,
        cheapest=options[0] if options else None,
    )
