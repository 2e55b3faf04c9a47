"""Reporting over confirmed (paid) bookings.

``summarize`` is a plain fold keyed by property and by period label;
the async helpers only load rows for it.
"""

import uuid
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Protocol

from sqlalchemy import Numeric, cast, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from staynest.booking.dates import group_key
from staynest.models.booking import Booking, PaymentStatus
from staynest.models.profile import Profile
from staynest.models.property import Property


class ConfirmedBooking(Protocol):
    property_id: uuid.UUID
    total_nights: int
    order_total: Decimal
    created_at: datetime


@dataclass
class BookingTally:
    count: int = 0
    nights: int = 0
    revenue: Decimal = Decimal("0.00")

    def add(self, booking: ConfirmedBooking) -> None:
        self.count += 1
        self.nights += booking.total_nights
        self.revenue += Decimal(booking.order_total)


@dataclass
class ReconciliationSummary:
    totals: BookingTally = field(default_factory=BookingTally)
    by_property: dict[uuid.UUID, BookingTally] = field(default_factory=dict)
    by_period: dict[str, BookingTally] = field(default_factory=dict)


def summarize(bookings: Iterable[ConfirmedBooking], monthly: bool = True) -> ReconciliationSummary:
    """Fold confirmed bookings into overall, per-property and per-period tallies.

    Periods are labelled by ``group_key`` over each booking's ``created_at``
    and come back in chronological order.
    """
    summary = ReconciliationSummary()
    for booking in bookings:
        summary.totals.add(booking)
        summary.by_property.setdefault(booking.property_id, BookingTally()).add(booking)
        summary.by_period.setdefault(group_key(booking.created_at, monthly), BookingTally()).add(booking)

    summary.by_period = dict(sorted(summary.by_period.items()))
    return summary


async def load_confirmed_bookings(
    db: AsyncSession,
    since: datetime | None = None,
) -> list[Booking]:
    """Return paid bookings, oldest first, optionally created on or after ``since``."""
    query = select(Booking).where(Booking.payment_status == PaymentStatus.PAID.value)
    if since is not None:
        query = query.where(Booking.created_at >= since)
    result = await db.execute(query.order_by(Booking.created_at))
    return list(result.scalars().all())


async def rental_summary(db: AsyncSession, owner_id: uuid.UUID) -> list[dict]:
    """Each of the owner's properties with nights and revenue summed over paid bookings."""
    result = await db.execute(
        select(
            Property.id,
            Property.name,
            Property.price,
            func.coalesce(func.sum(Booking.total_nights), 0).label("total_nights_sum"),
            cast(func.coalesce(func.sum(Booking.order_total), 0), Numeric(12, 2)).label("order_total_sum"),
        )
        .outerjoin(
            Booking,
            (Booking.property_id == Property.id)
            & (Booking.payment_status == PaymentStatus.PAID.value),
        )
        .where(Property.profile_id == owner_id)
        .group_by(Property.id, Property.name, Property.price)
        .order_by(Property.name)
    )
    return [
        {
            "id": row.id,
            "name": row.name,
            "price": row.price,
            "total_nights_sum": int(row.total_nights_sum),
            "order_total_sum": Decimal(str(row.order_total_sum)),
        }
        for row in result.all()
    ]


async def admin_counts(db: AsyncSession) -> dict[str, int]:
    """Marketplace-wide counters for the admin dashboard."""
    profiles = await db.execute(select(func.count()).select_from(Profile))
    properties = await db.execute(select(func.count()).select_from(Property))
    bookings = await db.execute(
        select(func.count()).select_from(Booking).where(Booking.payment_status == PaymentStatus.PAID.value)
    )
    return {
        "users_count": profiles.scalar_one(),
        "properties_count": properties.scalar_one(),
        "bookings_count": bookings.scalar_one(),
    }
