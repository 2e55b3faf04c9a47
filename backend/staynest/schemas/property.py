"""Pydantic v2 request/response schemas for property endpoints."""

import uuid
from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class PropertyCreate(BaseModel):
    """Schema for listing a new property."""

    name: str = Field(..., min_length=2, max_length=255)
    tagline: str = Field(..., min_length=2, max_length=255)
    category: str = Field(..., min_length=1, max_length=50)
    country: str = Field(..., min_length=2, max_length=2)
    description: str = Field(..., min_length=10)
    price: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    guests: int = Field(..., ge=1)
    bedrooms: int = Field(..., ge=0)
    beds: int = Field(..., ge=1)
    baths: int = Field(..., ge=0)
    amenities: list[str] = []
    image: str | None = Field(None, max_length=512)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class PropertyResponse(BaseModel):
    """Public property information returned from the API."""

    id: uuid.UUID
    profile_id: uuid.UUID
    name: str
    tagline: str
    category: str
    country: str
    description: str
    price: Decimal
    guests: int
    bedrooms: int
    beds: int
    baths: int
    amenities: list | None = None
    image: str | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PropertyListResponse(BaseModel):
    """Paginated list of properties."""

    items: list[PropertyResponse]
    total: int


class BlockedRange(BaseModel):
    check_in: date
    check_out: date


class AvailabilityResponse(BaseModel):
    """Confirmed stays that block the property's booking calendar."""

    property_id: uuid.UUID
    blocked: list[BlockedRange]
    blocked_dates: list[date]  # every occupied night, for calendar widgets


class RatingResponse(BaseModel):
    rating: Decimal
    count: int
