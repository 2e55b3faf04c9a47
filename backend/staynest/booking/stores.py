"""SQLAlchemy implementations of the booking collaborator ports.

Stores flush but never commit: the request's session is the unit of work,
committed or rolled back by ``staynest.database.get_db``. Driver errors are
logged and re-raised as ``PersistenceError``.
"""

import functools
import logging
import uuid
from decimal import Decimal

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from staynest.booking.availability import DateRange
from staynest.booking.errors import PersistenceError
from staynest.booking.ports import MissingProfile, ProfileFound, ProfileLookup
from staynest.models.booking import Booking, PaymentStatus
from staynest.models.profile import Profile
from staynest.models.property import Property

logger = logging.getLogger(__name__)


def _persistence_guard(func):
    """Translate SQLAlchemy failures into ``PersistenceError``."""

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except SQLAlchemyError as exc:
            logger.exception("%s failed", func.__qualname__)
            raise PersistenceError() from exc

    return wrapper


class SqlIdentityResolver:
    """Resolves an external identity to its marketplace profile."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    @_persistence_guard
    async def resolve(self, external_id: str) -> ProfileLookup:
        result = await self.db.execute(select(Profile).where(Profile.external_id == external_id))
        profile = result.scalar_one_or_none()
        if profile is None:
            return MissingProfile(external_id=external_id)
        return ProfileFound(profile=profile)


class SqlPropertyStore:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    @_persistence_guard
    async def get_nightly_price(self, property_id: uuid.UUID) -> Decimal | None:
        result = await self.db.execute(select(Property.price).where(Property.id == property_id))
        return result.scalar_one_or_none()


class SqlBookingStore:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    @_persistence_guard
    async def delete_pending_for(self, renter_id: uuid.UUID) -> int:
        """Delete every unpaid booking of the renter, across all properties."""
        result = await self.db.execute(
            delete(Booking).where(
                Booking.profile_id == renter_id,
                Booking.payment_status == PaymentStatus.PENDING.value,
            )
        )
        return result.rowcount or 0

    @_persistence_guard
    async def insert_pending(self, booking: Booking) -> uuid.UUID:
        booking.payment_status = PaymentStatus.PENDING.value
        self.db.add(booking)
        await self.db.flush()
        await self.db.refresh(booking)
        return booking.id

    @_persistence_guard
    async def get(self, booking_id: uuid.UUID) -> Booking | None:
        result = await self.db.execute(select(Booking).where(Booking.id == booking_id))
        return result.scalar_one_or_none()

    @_persistence_guard
    async def lock_property(self, property_id: uuid.UUID) -> None:
        """Serialize confirmations for one property until the transaction ends."""
        await self.db.execute(select(Property.id).where(Property.id == property_id).with_for_update())

    @_persistence_guard
    async def list_confirmed_ranges(
        self,
        property_id: uuid.UUID,
        exclude_booking_id: uuid.UUID | None = None,
    ) -> list[DateRange]:
        query = select(Booking.check_in, Booking.check_out).where(
            Booking.property_id == property_id,
            Booking.payment_status == PaymentStatus.PAID.value,
        )
        if exclude_booking_id is not None:
            query = query.where(Booking.id != exclude_booking_id)

        result = await self.db.execute(query.order_by(Booking.check_in))
        return [DateRange(row.check_in, row.check_out) for row in result.all()]

    @_persistence_guard
    async def mark_paid(self, booking_id: uuid.UUID) -> Booking:
        booking = await self.db.get(Booking, booking_id)
        booking.payment_status = PaymentStatus.PAID.value
        await self.db.flush()
        await self.db.refresh(booking)
        return booking

    @_persistence_guard
    async def delete_for_renter(self, renter_id: uuid.UUID, booking_id: uuid.UUID) -> bool:
        result = await self.db.execute(
            delete(Booking).where(Booking.id == booking_id, Booking.profile_id == renter_id)
        )
        return bool(result.rowcount)
