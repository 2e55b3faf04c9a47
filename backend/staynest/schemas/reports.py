"""Pydantic v2 schemas for rental and admin reporting endpoints."""

import uuid
from decimal import Decimal

from pydantic import BaseModel, ConfigDict


class TallyResponse(BaseModel):
    """Count, nights and revenue over a set of paid bookings."""

    count: int
    nights: int
    revenue: Decimal

    model_config = ConfigDict(from_attributes=True)


class PropertyTallyResponse(TallyResponse):
    property_id: uuid.UUID


class PeriodTallyResponse(TallyResponse):
    period: str  # YYYY-MM or YYYY-MM-DD


class ReconciliationResponse(BaseModel):
    """Paid bookings aggregated overall, per property and per period."""

    totals: TallyResponse
    by_property: list[PropertyTallyResponse]
    by_period: list[PeriodTallyResponse]


class RentalSummaryResponse(BaseModel):
    """One of the owner's properties with its paid-booking sums."""

    id: uuid.UUID
    name: str
    price: Decimal
    total_nights_sum: int
    order_total_sum: Decimal


class AdminStatsResponse(BaseModel):
    users_count: int
    properties_count: int
    bookings_count: int
