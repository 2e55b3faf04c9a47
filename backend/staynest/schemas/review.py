"""Pydantic v2 request/response schemas for reviews and favorites."""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ReviewCreate(BaseModel):
    property_id: uuid.UUID
    rating: int = Field(..., ge=1, le=5)
    comment: str = Field(..., min_length=10, max_length=1000)


class ReviewResponse(BaseModel):
    id: uuid.UUID
    property_id: uuid.UUID
    profile_id: uuid.UUID
    rating: int
    comment: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class FavoriteToggleResponse(BaseModel):
    property_id: uuid.UUID
    favorite: bool
