"""Route suggestion CRUD and cost lookup against the seeded routes table."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from sqlalchemy import select

from gosmooth.auth.ownership import ensure_can_modify
from gosmooth.db.models import Route, RouteSuggestion, User, utcnow
from gosmooth.errors import NotFoundError
from gosmooth.identifiers import parse_storage_id

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from gosmooth.trips.schemas import SuggestionRequest

logger = structlog.get_logger()


async def create_suggestion(db: AsyncSession, user_id: str, body: SuggestionRequest) -> RouteSuggestion:
    now = utcnow()
    suggestion = RouteSuggestion(
        user_id=user_id,
        start_location=body.start_location,
        end_location=body.end_location,
        description=body.description,
        created_at=now,
        updated_at=now,
    )
    db.add(suggestion)
    await db.commit()
    logger.info("route_suggested", suggestion_id=suggestion.id.hex, user_id=user_id)
    return suggestion


async def list_suggestions(db: AsyncSession) -> list[RouteSuggestion]:
    result = await db.execute(select(RouteSuggestion).order_by(RouteSuggestion.created_at))
    return list(result.scalars().all())


async def get_suggestion_or_404(db: AsyncSession, raw_id: str) -> RouteSuggestion:
    suggestion = await db.get(RouteSuggestion, parse_storage_id(raw_id, "route suggestion"))
    if suggestion is None:
        raise NotFoundError("route suggestion not found")
    return suggestion


async def update_suggestion(
    db: AsyncSession, caller: User, raw_id: str, body: SuggestionRequest
) -> RouteSuggestion:
    suggestion = await get_suggestion_or_404(db, raw_id)
    ensure_can_modify(caller, suggestion.user_id, "route suggestion")
    suggestion.start_location = body.start_location
    suggestion.end_location = body.end_location
    suggestion.description = body.description
    suggestion.updated_at = utcnow()
    await db.commit()
    logger.info("route_suggestion_updated", suggestion_id=suggestion.id.hex, by=caller.id.hex)
    return suggestion


async def delete_suggestion(db: AsyncSession, caller: User, raw_id: str) -> None:
    suggestion = await get_suggestion_or_404(db, raw_id)
    ensure_can_modify(caller, suggestion.user_id, "route suggestion")
    await db.delete(suggestion)
    await db.commit()
    logger.info("route_suggestion_deleted", suggestion_id=suggestion.id.hex, by=caller.id.hex)


async def find_routes(db: AsyncSession, start_location: str, end_location: str) -> list[Route]:
    """Known routes between two location ids, cheapest first."""
    result = await db.execute(
        select(Route)
        .where(Route.start_loc_id == start_location, Route.end_loc_id == end_location)
        .order_by(Route.cost, Route.duration)
    )
    return list(result.scalars().all())
