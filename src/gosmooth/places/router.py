"""Public place and location endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from gosmooth.database import get_session
from gosmooth.places.schemas import LocationListResponse, PlaceEnvelope, PlaceListResponse
from gosmooth.places.service import get_place, list_locations, list_places

router = APIRouter(prefix="/api", tags=["Places"])


@router.get("/places", response_model=PlaceListResponse)
async def get_places(db: AsyncSession = Depends(get_session)) -> PlaceListResponse:
    """List all places with ratings derived from reviews."""
    return PlaceListResponse(places=await list_places(db))


@router.get("/places/{place_id}", response_model=PlaceEnvelope)
async def get_place_endpoint(place_id: str, db: AsyncSession = Depends(get_session)) -> PlaceEnvelope:
    """Get a place by external id, falling back to storage id."""
    return PlaceEnvelope(place=await get_place(db, place_id))


@router.get("/locations", response_model=LocationListResponse)
async def get_locations(db: AsyncSession = Depends(get_session)) -> LocationListResponse:
    """List all locations."""
    return LocationListResponse(locations=await list_locations(db))
