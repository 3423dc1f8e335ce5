"""Admin-only response schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ImageType = Literal["cover", "highlight"]


class StatsResponse(BaseModel):
    total_users: int
    total_reviews: int
    total_routes: int
    last_updated: datetime


class UploadResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image_url: str = Field(alias="imageUrl")
