"""Stay pricing: pure functions over ``Decimal`` currency."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from staynest.booking.dates import night_count
from staynest.booking.errors import InvalidPriceError

Money = Decimal | int | float | str


@dataclass(frozen=True)
class BookingTotals:
    """Price breakdown captured on a booking at creation time."""

    total_nights: int
    subtotal: Decimal
    service_fee: Decimal
    order_total: Decimal


def _to_decimal(value: Money) -> Decimal:
    # floats would bring binary rounding noise into currency values
    if isinstance(value, float):
        value = str(value)
    return Decimal(value)


def compute_totals(
    check_in: date | datetime,
    check_out: date | datetime,
    nightly_price: Money,
    service_fee: Money = Decimal("0.00"),
) -> BookingTotals:
    """Compute nights, subtotal and order total for a stay.

    ``order_total`` is exactly ``total_nights * nightly_price`` plus the flat
    ``service_fee``. Nothing is rounded here; sub-cent prices keep their
    full precision.

    Raises:
        InvalidRangeError: If ``check_out`` is not after ``check_in``.
        InvalidPriceError: If the nightly price is not positive or the fee is negative.
    """
    price = _to_decimal(nightly_price)
    if price <= 0:
        raise InvalidPriceError(f"Nightly price must be greater than zero, got {price}")
    fee = _to_decimal(service_fee)
    if fee < 0:
        raise InvalidPriceError(f"Service fee cannot be negative, got {fee}")

    total_nights = night_count(check_in, check_out)
    subtotal = price * total_nights
    return BookingTotals(
        total_nights=total_nights,
        subtotal=subtotal,
        service_fee=fee,
        order_total=subtotal + fee,
    )
