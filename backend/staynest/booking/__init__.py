"""Booking engine: date math, pricing, availability and the reservation lifecycle."""

from staynest.booking.availability import DateRange, find_conflicts, has_conflict, ranges_overlap
from staynest.booking.dates import group_key, iter_nights, night_count
from staynest.booking.errors import (
    BookingConflictError,
    BookingError,
    BookingNotFoundError,
    InvalidPriceError,
    InvalidRangeError,
    PersistenceError,
    ProfileRequiredError,
    PropertyNotFoundError,
    UnauthenticatedError,
)
from staynest.booking.lifecycle import ReservationManager
from staynest.booking.pricing import BookingTotals, compute_totals

__all__ = [
    "BookingConflictError",
    "BookingError",
    "BookingNotFoundError",
    "BookingTotals",
    "DateRange",
    "InvalidPriceError",
    "InvalidRangeError",
    "PersistenceError",
    "ProfileRequiredError",
    "PropertyNotFoundError",
    "ReservationManager",
    "UnauthenticatedError",
    "compute_totals",
    "find_conflicts",
    "group_key",
    "has_conflict",
    "iter_nights",
    "night_count",
    "ranges_overlap",
]
