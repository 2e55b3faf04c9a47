"""Tests for stay pricing."""

from datetime import date
from decimal import Decimal

import pytest

from staynest.booking.errors import InvalidPriceError, InvalidRangeError
from staynest.booking.pricing import BookingTotals, compute_totals


class TestComputeTotals:
    def test_three_nights_at_100(self):
        totals = compute_totals(date(2025, 1, 1), date(2025, 1, 4), Decimal("100"))
        assert totals == BookingTotals(
            total_nights=3,
            subtotal=Decimal("300.00"),
            service_fee=Decimal("0.00"),
            order_total=Decimal("300.00"),
        )

    @pytest.mark.parametrize(
        ("price", "nights"),
        [(Decimal("0.01"), 1), (Decimal("99.99"), 7), (Decimal("129.35"), 30), (80, 2), ("45.10", 3)],
    )
    def test_order_total_is_exact_product(self, price, nights: int):
        check_in = date(2025, 5, 1)
        check_out = date(2025, 5, 1 + nights)
        totals = compute_totals(check_in, check_out, price)
        assert totals.total_nights == nights
        assert totals.order_total == Decimal(str(price)) * nights

    def test_repeated_calls_agree(self):
        args = (date(2025, 1, 1), date(2025, 1, 11), Decimal("33.33"))
        results = {compute_totals(*args) for _ in range(5)}
        assert len(results) == 1
        assert results.pop().order_total == Decimal("333.30")

    def test_float_price_has_no_binary_noise(self):
        totals = compute_totals(date(2025, 1, 1), date(2025, 1, 4), 0.1)
        assert totals.order_total == Decimal("0.3")
        assert str(totals.order_total) == "0.3"

    @pytest.mark.parametrize(
        ("price", "check_out", "expected"),
        [
            (Decimal("0.004"), date(2025, 1, 2), Decimal("0.004")),
            (Decimal("33.335"), date(2025, 1, 4), Decimal("100.005")),
        ],
    )
    def test_sub_cent_price_keeps_full_precision(self, price, check_out, expected):
        totals = compute_totals(date(2025, 1, 1), check_out, price)
        assert totals.subtotal == expected
        assert totals.order_total == expected

    def test_service_fee_is_added_once(self):
        totals = compute_totals(date(2025, 1, 1), date(2025, 1, 4), Decimal("100"), Decimal("25"))
        assert totals.subtotal == Decimal("300.00")
        assert totals.service_fee == Decimal("25.00")
        assert totals.order_total == Decimal("325.00")

    @pytest.mark.parametrize("price", [Decimal("0"), Decimal("-10"), 0, "-0.01"])
    def test_non_positive_price_rejected(self, price):
        with pytest.raises(InvalidPriceError):
            compute_totals(date(2025, 1, 1), date(2025, 1, 4), price)

    def test_negative_fee_rejected(self):
        with pytest.raises(InvalidPriceError):
            compute_totals(date(2025, 1, 1), date(2025, 1, 4), Decimal("100"), Decimal("-1"))

    def test_invalid_range_propagates(self):
        with pytest.raises(InvalidRangeError):
            compute_totals(date(2025, 1, 4), date(2025, 1, 4), Decimal("100"))
