"""Pydantic v2 request/response schemas for booking endpoints."""

import uuid
from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class BookingCreate(BaseModel):
    """Schema for placing a hold on a property.

    Date order is checked by the booking engine so that a bad range is
    reported with the same error everywhere.
    """

    property_id: uuid.UUID
    check_in: date
    check_out: date


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class QuoteResponse(BaseModel):
    """Price breakdown for a stay."""

    total_nights: int
    subtotal: Decimal
    service_fee: Decimal
    order_total: Decimal


class BookingPropertySummary(BaseModel):
    id: uuid.UUID
    name: str
    country: str

    model_config = ConfigDict(from_attributes=True)


class BookingResponse(BaseModel):
    """Standard booking response."""

    id: uuid.UUID
    property_id: uuid.UUID
    profile_id: uuid.UUID
    check_in: date
    check_out: date
    total_nights: int
    order_total: Decimal
    payment_status: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class BookingDetailResponse(BookingResponse):
    """Booking with a short summary of its property, for the renter's trip list."""

    property: BookingPropertySummary | None = None


class BookingListResponse(BaseModel):
    items: list[BookingDetailResponse]
    total: int
