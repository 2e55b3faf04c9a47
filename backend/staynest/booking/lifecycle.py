"""Reservation lifecycle: holds, payment confirmation and cancellation.

A reservation starts as a *hold* (``pending``). Holds never block other
renters; availability is enforced when payment is confirmed, which is the
only transition to ``paid``.
"""

import logging
import uuid
from datetime import date
from decimal import Decimal

from staynest.booking.availability import DateRange, find_conflicts
from staynest.booking.errors import (
    BookingConflictError,
    BookingNotFoundError,
    ProfileRequiredError,
    PropertyNotFoundError,
    UnauthenticatedError,
)
from staynest.booking.ports import (
    BookingStore,
    IdentityResolver,
    MissingProfile,
    PropertyStore,
    RenterContext,
)
from staynest.booking.pricing import BookingTotals, compute_totals
from staynest.models.booking import Booking, PaymentStatus
from staynest.models.profile import Profile

logger = logging.getLogger(__name__)


class ReservationManager:
    """Creates, confirms and cancels bookings through the collaborator ports."""

    def __init__(
        self,
        identities: IdentityResolver,
        properties: PropertyStore,
        bookings: BookingStore,
        service_fee: Decimal = Decimal("0.00"),
    ) -> None:
        self.identities = identities
        self.properties = properties
        self.bookings = bookings
        self.service_fee = service_fee

    async def require_profile(self, renter: RenterContext) -> Profile:
        """Resolve the caller's profile or raise.

        Raises:
            UnauthenticatedError: No identity on the request.
            ProfileRequiredError: The identity has no profile yet.
        """
        if renter.external_id is None:
            raise UnauthenticatedError()
        lookup = await self.identities.resolve(renter.external_id)
        if isinstance(lookup, MissingProfile):
            raise ProfileRequiredError()
        return lookup.profile

    async def quote(self, property_id: uuid.UUID, check_in: date, check_out: date) -> BookingTotals:
        """Price a stay at the property's current nightly rate without reserving it."""
        nightly_price = await self.properties.get_nightly_price(property_id)
        if nightly_price is None:
            raise PropertyNotFoundError()
        return compute_totals(check_in, check_out, nightly_price, self.service_fee)

    async def reserve(
        self,
        renter: RenterContext,
        property_id: uuid.UUID,
        check_in: date,
        check_out: date,
    ) -> uuid.UUID:
        """Place a new hold for the renter and return its booking id.

        Every check runs before the first write. The renter's existing holds,
        on any property, are deleted before the new one is inserted; both
        writes belong to the caller's transaction.
        """
        profile = await self.require_profile(renter)
        totals = await self.quote(property_id, check_in, check_out)

        pruned = await self.bookings.delete_pending_for(profile.id)
        if pruned:
            logger.info("Pruned %d stale hold(s) for profile %s", pruned, profile.id)

        booking_id = await self.bookings.insert_pending(
            Booking(
                property_id=property_id,
                profile_id=profile.id,
                check_in=check_in,
                check_out=check_out,
                total_nights=totals.total_nights,
                order_total=totals.order_total,
                payment_status=PaymentStatus.PENDING.value,
            )
        )
        logger.info(
            "Created hold %s on property %s for profile %s: %d night(s), total %s",
            booking_id,
            property_id,
            profile.id,
            totals.total_nights,
            totals.order_total,
        )
        return booking_id

    async def confirm_payment(self, booking_id: uuid.UUID) -> Booking:
        """Mark a hold as paid after re-checking it against confirmed bookings.

        Raises:
            BookingNotFoundError: Unknown booking id.
            BookingConflictError: Another paid booking already covers some of the dates.
        """
        booking = await self.bookings.get(booking_id)
        if booking is None:
            raise BookingNotFoundError()
        if booking.payment_status == PaymentStatus.PAID.value:
            return booking

        await self.bookings.lock_property(booking.property_id)
        confirmed = await self.bookings.list_confirmed_ranges(
            booking.property_id, exclude_booking_id=booking.id
        )
        conflicts = find_conflicts(booking.check_in, booking.check_out, confirmed)
        if conflicts:
            logger.warning(
                "Rejected payment for booking %s: %s overlaps %d confirmed booking(s)",
                booking.id,
                DateRange(booking.check_in, booking.check_out),
                len(conflicts),
            )
            raise BookingConflictError(
                f"Dates {booking.check_in.isoformat()} to {booking.check_out.isoformat()} "
                "are no longer available"
            )

        booking = await self.bookings.mark_paid(booking.id)
        logger.info("Booking %s marked paid", booking.id)
        return booking

    async def cancel(self, renter: RenterContext, booking_id: uuid.UUID) -> None:
        """Delete one of the renter's own bookings."""
        profile = await self.require_profile(renter)
        if not await self.bookings.delete_for_renter(profile.id, booking_id):
            raise BookingNotFoundError()
        logger.info("Profile %s deleted booking %s", profile.id, booking_id)
