"""Request/response schemas for places and locations.

Place and location JSON keeps the PascalCase keys the web client reads
(``PlaceID``, ``Name``, ``LocationID``...). Input accepts either those keys or
their snake_case forms.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Coordinates(BaseModel):
    lat: float = 0.0
    lng: float = 0.0


# ---------------------------------------------------------------------------
# Places
# ---------------------------------------------------------------------------


class PlaceResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    storage_id: str = Field(alias="_id")
    place_id: str = Field(alias="PlaceID")
    name: str = Field(alias="Name")
    location_id: str = Field(alias="LocationID")
    description: str = Field("", alias="Description")
    category: str = Field("", alias="Category")
    cover_image: str = Field("", alias="CoverImage")
    highlight_images: list[str] = Field(default_factory=list, alias="HighlightImages")
    rating: float = Field(0.0, alias="Rating")
    coordinates: Coordinates = Field(default_factory=Coordinates, alias="Coordinates")
    address: str = Field("", alias="Address")
    phone: str = Field("", alias="Phone")
    website: str = Field("", alias="Website")
    hours: str = Field("", alias="Hours")
    created_at: datetime | None = Field(None, alias="CreatedAt")
    updated_at: datetime | None = Field(None, alias="UpdatedAt")


class PlaceEnvelope(BaseModel):
    place: PlaceResponse


class PlaceListResponse(BaseModel):
    places: list[PlaceResponse]


def _alias(*names: str) -> AliasChoices:
    return AliasChoices(*names)


class PlacePatch(BaseModel):
    """Admin place update. Only keys present in the body are applied."""

    name: str | None = Field(None, min_length=1, validation_alias=_alias("Name", "name"))
    location_id: str | None = Field(
        None, min_length=1, validation_alias=_alias("LocationID", "location_id", "locationId")
    )
    description: str | None = Field(None, validation_alias=_alias("Description", "description"))
    category: str | None = Field(None, validation_alias=_alias("Category", "category"))
    cover_image: str | None = Field(None, validation_alias=_alias("CoverImage", "cover_image", "coverImage"))
    highlight_images: list[str] | None = Field(
        None, validation_alias=_alias("HighlightImages", "highlight_images", "highlights", "Highlights")
    )
    coordinates: Coordinates | None = Field(None, validation_alias=_alias("Coordinates", "coordinates"))
    address: str | None = Field(None, validation_alias=_alias("Address", "address"))
    phone: str | None = Field(None, validation_alias=_alias("Phone", "phone"))
    website: str | None = Field(None, validation_alias=_alias("Website", "website"))
    hours: str | None = Field(None, validation_alias=_alias("Hours", "hours"))


class PlaceCreate(PlacePatch):
    """Admin place creation. Name and location are required."""

    name: str = Field(..., min_length=1, validation_alias=_alias("Name", "name"))
    location_id: str = Field(..., min_length=1, validation_alias=_alias("LocationID", "location_id", "locationId"))


# ---------------------------------------------------------------------------
# Locations
# ---------------------------------------------------------------------------


class LocationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    location_id: str = Field(alias="LocationID")
    name: str = Field(alias="Name")
    description: str = Field("", alias="Description")
    category: str | None = Field(None, alias="Category")
    lat: float | None = Field(None, alias="Lat")
    lng: float | None = Field(None, alias="Lng")
    address: str | None = Field(None, alias="Address")
    phone: str | None = Field(None, alias="Phone")
    website: str | None = Field(None, alias="Website")


class LocationListResponse(BaseModel):
    locations: list[LocationResponse]
