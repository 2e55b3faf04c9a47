"""Calendar arithmetic for stays. Everything is whole-day granularity."""

from collections.abc import Iterator
from datetime import date, datetime, timedelta

from staynest.booking.errors import InvalidRangeError


def _as_date(value: date | datetime) -> date:
    # datetime is a subclass of date, so check it first
    if isinstance(value, datetime):
        return value.date()
    return value


def night_count(check_in: date | datetime, check_out: date | datetime) -> int:
    """Return the number of nights between two calendar dates.

    Time of day is ignored.

    Raises:
        InvalidRangeError: If ``check_out`` is not after ``check_in``.
    """
    start = _as_date(check_in)
    end = _as_date(check_out)
    if end <= start:
        raise InvalidRangeError(
            f"check_out ({end.isoformat()}) must be after check_in ({start.isoformat()})"
        )
    return (end - start).days


def iter_nights(check_in: date | datetime, check_out: date | datetime) -> Iterator[date]:
    """Yield each occupied night: check-in inclusive, check-out exclusive."""
    day = _as_date(check_in)
    end = _as_date(check_out)
    while day < end:
        yield day
        day += timedelta(days=1)


def group_key(timestamp: date | datetime, monthly: bool = True) -> str:
    """Return a stable bucket label, ``YYYY-MM`` or ``YYYY-MM-DD``."""
    day = _as_date(timestamp)
    if monthly:
        return f"{day.year:04d}-{day.month:02d}"
    return day.isoformat()
