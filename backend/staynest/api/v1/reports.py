"""Reporting routes: owner rental summaries and the admin dashboard."""

from datetime import datetime

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from staynest.api.deps import get_admin_profile, get_current_profile, get_db
from staynest.booking.reconciliation import (
    admin_counts,
    load_confirmed_bookings,
    rental_summary,
    summarize,
)
from staynest.models.profile import Profile
from staynest.schemas.reports import (
    AdminStatsResponse,
    PeriodTallyResponse,
    PropertyTallyResponse,
    ReconciliationResponse,
    RentalSummaryResponse,
    TallyResponse,
)

rentals_router = APIRouter(prefix="/api/v1/rentals", tags=["rentals"])
admin_router = APIRouter(prefix="/api/v1/admin", tags=["admin"])


@rentals_router.get("", response_model=list[RentalSummaryResponse], summary="The caller's rentals with revenue")
async def list_rentals(
    db: AsyncSession = Depends(get_db),
    profile: Profile = Depends(get_current_profile),
) -> list[dict]:
    """Each property the caller owns, with nights and revenue summed over paid bookings."""
    return await rental_summary(db, profile.id)


@admin_router.get("/stats", response_model=AdminStatsResponse, summary="Marketplace counters")
async def get_stats(
    db: AsyncSession = Depends(get_db),
    _admin: Profile = Depends(get_admin_profile),
) -> dict:
    return await admin_counts(db)


@admin_router.get(
    "/bookings/summary",
    response_model=ReconciliationResponse,
    summary="Paid bookings per property and per period",
)
async def get_booking_summary(
    monthly: bool = Query(True, description="Bucket by month (YYYY-MM) instead of day"),
    since: datetime | None = Query(None, description="Only bookings created at or after this time"),
    db: AsyncSession = Depends(get_db),
    _admin: Profile = Depends(get_admin_profile),
) -> ReconciliationResponse:
    """Aggregate paid bookings into counts, nights and revenue."""
    bookings = await load_confirmed_bookings(db, since=since)
    summary = summarize(bookings, monthly=monthly)
    return ReconciliationResponse(
        totals=TallyResponse.model_validate(summary.totals),
        by_property=[
            PropertyTallyResponse(property_id=pid, **vars(tally)) for pid, tally in summary.by_property.items()
        ],
        by_period=[PeriodTallyResponse(period=period, **vars(tally)) for period, tally in summary.by_period.items()],
    )
