"""Collaborator interfaces consumed by the reservation lifecycle.

The lifecycle manager only talks to these protocols; ``staynest.booking.stores``
implements them over an ``AsyncSession`` and tests may substitute mocks.
"""

import uuid
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol

from staynest.booking.availability import DateRange
from staynest.models.booking import Booking
from staynest.models.profile import Profile


@dataclass(frozen=True)
class RenterContext:
    """Identity of the caller, passed explicitly into every core operation.

    ``external_id`` is ``None`` when the request carried no valid credentials.
    """

    external_id: str | None


@dataclass(frozen=True)
class ProfileFound:
    profile: Profile


@dataclass(frozen=True)
class MissingProfile:
    """The identity is authenticated but has no marketplace profile."""

    external_id: str


ProfileLookup = ProfileFound | MissingProfile


class IdentityResolver(Protocol):
    async def resolve(self, external_id: str) -> ProfileLookup: ...


class PropertyStore(Protocol):
    async def get_nightly_price(self, property_id: uuid.UUID) -> Decimal | None: ...


class BookingStore(Protocol):
    async def delete_pending_for(self, renter_id: uuid.UUID) -> int: ...

    async def insert_pending(self, booking: Booking) -> uuid.UUID: ...

    async def get(self, booking_id: uuid.UUID) -> Booking | None: ...

    async def lock_property(self, property_id: uuid.UUID) -> None: ...

    async def list_confirmed_ranges(
        self,
        property_id: uuid.UUID,
        exclude_booking_id: uuid.UUID | None = None,
    ) -> list[DateRange]: ...

    async def mark_paid(self, booking_id: uuid.UUID) -> Booking: ...

    async def delete_for_renter(self, renter_id: uuid.UUID, booking_id: uuid.UUID) -> bool: ...
