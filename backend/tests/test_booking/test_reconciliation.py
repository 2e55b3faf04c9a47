"""Tests for the confirmed-booking reconciliation fold and report queries."""

import uuid
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from conftest import create_profile, create_property
from sqlalchemy.ext.asyncio import AsyncSession

from staynest.booking.reconciliation import (
    admin_counts,
    load_confirmed_bookings,
    rental_summary,
    summarize,
)
from staynest.models.booking import Booking, PaymentStatus
from staynest.models.profile import Profile
from staynest.models.property import Property


@dataclass
class _Row:
    property_id: uuid.UUID
    total_nights: int
    order_total: Decimal
    created_at: datetime


PROP_A = uuid.uuid4()
PROP_B = uuid.uuid4()

ROWS = [
    _Row(PROP_A, 3, Decimal("300.00"), datetime(2025, 1, 5, 10)),
    _Row(PROP_A, 2, Decimal("200.00"), datetime(2025, 2, 1, 9)),
    _Row(PROP_B, 1, Decimal("80.50"), datetime(2025, 1, 31, 23, 59)),
    _Row(PROP_B, 7, Decimal("700.00"), datetime(2024, 12, 24, 12)),
]


class TestSummarize:
    def test_empty(self):
        summary = summarize([])
        assert summary.totals.count == 0
        assert summary.totals.revenue == Decimal("0.00")
        assert summary.by_property == {}
        assert summary.by_period == {}

    def test_totals_match_naive_rescan(self):
        summary = summarize(ROWS)
        assert summary.totals.count == len(ROWS)
        assert summary.totals.nights == sum(r.total_nights for r in ROWS)
        assert summary.totals.revenue == sum(r.order_total for r in ROWS)

    def test_grouped_by_property(self):
        summary = summarize(ROWS)
        for pid in (PROP_A, PROP_B):
            rows = [r for r in ROWS if r.property_id == pid]
            tally = summary.by_property[pid]
            assert tally.count == len(rows)
            assert tally.nights == sum(r.total_nights for r in rows)
            assert tally.revenue == sum(r.order_total for r in rows)

    def test_grouped_by_month_in_order(self):
        summary = summarize(ROWS)
        assert list(summary.by_period) == ["2024-12", "2025-01", "2025-02"]
        assert summary.by_period["2025-01"].count == 2
        assert summary.by_period["2025-01"].revenue == Decimal("380.50")

    def test_grouped_by_day(self):
        summary = summarize(ROWS, monthly=False)
        assert list(summary.by_period) == ["2024-12-24", "2025-01-05", "2025-01-31", "2025-02-01"]


async def _add_booking(
    db_session: AsyncSession, prop: Property, renter: Profile, nights: int, status: str
) -> Booking:
    booking = Booking(
        property_id=prop.id,
        profile_id=renter.id,
        check_in=date(2025, 1, 1),
        check_out=date(2025, 1, 1 + nights),
        total_nights=nights,
        order_total=prop.price * nights,
        payment_status=status,
    )
    db_session.add(booking)
    await db_session.flush()
    await db_session.refresh(booking)
    return booking


class TestReportQueries:
    async def test_only_paid_bookings_loaded(
        self, db_session: AsyncSession, renter: Profile, test_property: Property
    ):
        paid = await _add_booking(db_session, test_property, renter, 2, PaymentStatus.PAID.value)
        await _add_booking(db_session, test_property, renter, 3, PaymentStatus.PENDING.value)

        bookings = await load_confirmed_bookings(db_session)
        assert [b.id for b in bookings] == [paid.id]

        summary = summarize(bookings)
        assert summary.totals.nights == 2
        assert summary.totals.revenue == Decimal("200.00")

    async def test_rental_summary_sums_paid_bookings(
        self,
        db_session: AsyncSession,
        owner: Profile,
        renter: Profile,
        test_property: Property,
    ):
        empty = await create_property(db_session, owner, "50.00")
        empty.name = "Zen Loft"
        await db_session.flush()
        await _add_booking(db_session, test_property, renter, 2, PaymentStatus.PAID.value)
        await _add_booking(db_session, test_property, renter, 4, PaymentStatus.PAID.value)
        await _add_booking(db_session, test_property, renter, 5, PaymentStatus.PENDING.value)

        rows = await rental_summary(db_session, owner.id)
        assert [r["id"] for r in rows] == [test_property.id, empty.id]
        assert rows[0]["total_nights_sum"] == 6
        assert rows[0]["order_total_sum"] == Decimal("600.00")
        assert rows[1]["total_nights_sum"] == 0
        assert rows[1]["order_total_sum"] == Decimal("0")

    async def test_rental_summary_revenue_is_exact_cents(
        self, db_session: AsyncSession, owner: Profile, renter: Profile
    ):
        cheap = await create_property(db_session, owner, "0.10")
        for _ in range(3):
            await _add_booking(db_session, cheap, renter, 1, PaymentStatus.PAID.value)

        rows = await rental_summary(db_session, owner.id)
        assert rows[0]["order_total_sum"] == Decimal("0.30")
        assert str(rows[0]["order_total_sum"]) == "0.30"

    async def test_rental_summary_scoped_to_owner(self, db_session: AsyncSession, test_property: Property):
        stranger = await create_profile(db_session, name="stranger")
        assert await rental_summary(db_session, stranger.id) == []

    async def test_admin_counts(self, db_session: AsyncSession, renter: Profile, test_property: Property):
        await _add_booking(db_session, test_property, renter, 1, PaymentStatus.PAID.value)
        await _add_booking(db_session, test_property, renter, 1, PaymentStatus.PENDING.value)

        counts = await admin_counts(db_session)
        assert counts == {"users_count": 2, "properties_count": 1, "bookings_count": 1}
