"""Availability checks against confirmed bookings.

Ranges are half-open ``[check_in, check_out)``: a stay that checks out on
the day another checks in does not conflict with it.
"""

import uuid
from collections.abc import Iterable
from datetime import date
from typing import NamedTuple


class DateRange(NamedTuple):
    check_in: date
    check_out: date


def ranges_overlap(a: DateRange, b: DateRange) -> bool:
    """Half-open interval overlap test. Symmetric in its arguments."""
    return a.check_in < b.check_out and b.check_in < a.check_out


def find_conflicts(
    check_in: date,
    check_out: date,
    existing_confirmed_ranges: Iterable[DateRange | tuple[date, date]],
) -> list[DateRange]:
    """Return every existing range that overlaps ``[check_in, check_out)``."""
    candidate = DateRange(check_in, check_out)
    return [
        DateRange(*existing)
        for existing in existing_confirmed_ranges
        if ranges_overlap(candidate, DateRange(*existing))
    ]


def has_conflict(
    property_id: uuid.UUID,
    check_in: date,
    check_out: date,
    existing_confirmed_ranges: Iterable[DateRange | tuple[date, date]],
) -> bool:
    """Return True if the candidate stay overlaps any confirmed range of the property.

    ``existing_confirmed_ranges`` must already be scoped to ``property_id``
    and contain paid bookings only; pending holds never block.
    """
    return bool(find_conflicts(check_in, check_out, existing_confirmed_ranges))
