"""Request/response schemas for route suggestions and cost estimates."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SuggestionRequest(BaseModel):
    start_location: str = Field(..., min_length=1, max_length=256)
    end_location: str = Field(..., min_length=1, max_length=256)
    description: str = Field("", max_length=5000)


class SuggestionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    start_location: str
    end_location: str
    description: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v: Any) -> str:
        return v.hex if isinstance(v, uuid.UUID) else str(v)


class SuggestionCreatedResponse(BaseModel):
    message: str = "route suggestion saved successfully"
    id: str
    suggestion: SuggestionResponse


class SuggestionEnvelope(BaseModel):
    suggestion: SuggestionResponse


class SuggestionListResponse(BaseModel):
    suggestions: list[SuggestionResponse]


# ---------------------------------------------------------------------------
# Cost estimate
# ---------------------------------------------------------------------------


class CostQuery(BaseModel):
    start_location: str
    end_location: str
    distance: float | None = None
    duration: int | None = None


class RouteOption(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    start_loc_id: str
    end_loc_id: str
    distance: float
    duration: int
    cost: float
    transport_mode: str


class CostEstimateResponse(BaseModel):
    message: str = "cost estimation"
    input: CostQuery
    options: list[RouteOption]
    cheapest: RouteOption | None = None
