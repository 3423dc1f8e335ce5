"""Places and locations business logic, including the derived place rating."""

from __future__ import annotations

import uuid
from collections.abc import Iterable
from typing import TYPE_CHECKING

import structlog
from sqlalchemy import func, select

from gosmooth.db.models import Location, Place, Review, utcnow
from gosmooth.errors import NotFoundError
from gosmooth.identifiers import parse_storage_id, try_parse_storage_id
from gosmooth.places.schemas import Coordinates, LocationResponse, PlaceResponse

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from gosmooth.places.schemas import PlaceCreate, PlacePatch

logger = structlog.get_logger()


# ---------------------------------------------------------------------------
# Rating aggregation
# ---------------------------------------------------------------------------


async def place_ratings(db: AsyncSession, external_ids: Iterable[str]) -> dict[str, float]:
    """
    Mean review rating per external place id.

    Computed as SUM(rating) / COUNT(*) over reviews whose ``place_id`` equals
    the place's external id. Places without reviews map to 0.0. Nothing is
    cached; every call hits the reviews table.
    """
    ids = [i for i in external_ids if i]
    ratings = dict.fromkeys(ids, 0.0)
    if not ids:
        return ratings
    result = await db.execute(
        select(Review.place_id, func.sum(Review.rating), func.count(Review.id))
        .where(Review.place_id.in_(ids))
        .group_by(Review.place_id)
    )
    for place_id, total, count in result.all():
        if count:
            ratings[place_id] = float(total) / float(count)
    return ratings


def to_place_response(place: Place, rating: float) -> PlaceResponse:
    return PlaceResponse(
        storage_id=place.id.hex,
        place_id=place.place_id or place.id.hex,
        name=place.name,
        location_id=place.location_id,
        description=place.description,
        category=place.category,
        cover_image=place.cover_image,
        highlight_images=list(place.highlight_images or []),
        rating=rating,
        coordinates=Coordinates(lat=place.lat, lng=place.lng),
        address=place.address,
        phone=place.phone,
        website=place.website,
        hours=place.hours,
        created_at=place.created_at,
        updated_at=place.updated_at,
    )


async def list_places(db: AsyncSession) -> list[PlaceResponse]:
    """All places with their rating recomputed from reviews."""
    places = list((await db.execute(select(Place).order_by(Place.created_at))).scalars().all())
    ratings = await place_ratings(db, (p.place_id for p in places))
    return [to_place_response(p, ratings.get(p.place_id or "", 0.0)) for p in places]


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


async def find_place(db: AsyncSession, raw_id: str) -> Place | None:
    """
    Resolve a place from a URL id.

    Tries the external id first; on a miss, and only if ``raw_id`` is in
    storage-id format, tries the storage id.
    """
    result = await db.execute(select(Place).where(Place.place_id == raw_id))
    place = result.scalar_one_or_none()
    if place is not None:
        return place
    storage_id = try_parse_storage_id(raw_id)
    if storage_id is None:
        return None
    return await db.get(Place, storage_id)


async def get_place(db: AsyncSession, raw_id: str) -> PlaceResponse:
    place = await find_place(db, raw_id)
    if place is None:
        raise NotFoundError("Place not found")
    ratings = await place_ratings(db, [place.place_id or ""])
    return to_place_response(place, ratings.get(place.place_id or "", 0.0))


# ---------------------------------------------------------------------------
# Admin writes
# ---------------------------------------------------------------------------


def _apply_patch(place: Place, patch: PlacePatch) -> None:
    fields = patch.model_fields_set
    for name in ("name", "location_id", "description", "category", "cover_image", "address", "phone", "website", "hours"):
        if name in fields and getattr(patch, name) is not None:
            setattr(place, name, getattr(patch, name))
    if "highlight_images" in fields and patch.highlight_images is not None:
        place.highlight_images = list(patch.highlight_images)
    if "coordinates" in fields and patch.coordinates is not None:
        place.lat = patch.coordinates.lat
        place.lng = patch.coordinates.lng


async def create_place(db: AsyncSession, body: PlaceCreate) -> PlaceResponse:
    """Create a place. Its external id is the hex of its new storage id."""
    now = utcnow()
    storage_id = uuid.uuid4()
    place = Place(id=storage_id, place_id=storage_id.hex, name=body.name, location_id=body.location_id)
    _apply_patch(place, body)
    place.created_at = now
    place.updated_at = now
    db.add(place)
    await db.commit()
    logger.info("place_created", place_id=place.place_id, name=place.name)
    return to_place_response(place, 0.0)


async def update_place(db: AsyncSession, raw_id: str, patch: PlacePatch) -> PlaceResponse:
    place = await db.get(Place, parse_storage_id(raw_id, "place"))
    if place is None:
        raise NotFoundError("place not found")
    _apply_patch(place, patch)
    place.updated_at = utcnow()
    await db.commit()
    logger.info("place_updated", place_id=place.place_id, fields=sorted(patch.model_fields_set))
    ratings = await place_ratings(db, [place.place_id or ""])
    return to_place_response(place, ratings.get(place.place_id or "", 0.0))


async def delete_place(db: AsyncSession, raw_id: str) -> None:
    """Delete a place by storage id. Reviews referencing it are left untouched."""
    place = await db.get(Place, parse_storage_id(raw_id, "place"))
    if place is None:
        raise NotFoundError("place not found")
    await db.delete(place)
    await db.commit()
    logger.info("place_deleted", place_id=place.place_id)


# ---------------------------------------------------------------------------
# Locations
# ---------------------------------------------------------------------------


async def list_locations(db: AsyncSession) -> list[LocationResponse]:
    result = await db.execute(select(Location).order_by(Location.location_id))
    return [
        LocationResponse(
            location_id=loc.location_id,
            name=loc.name,
            description=loc.description,
            category=loc.category,
            lat=loc.lat,
            lng=loc.lng,
            address=loc.address,
            phone=loc.phone,
            website=loc.website,
        )
        for loc in result.scalars().all()
    ]
