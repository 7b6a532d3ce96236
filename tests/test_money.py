"""
Tests for cents arithmetic and hour parsing.
"""

from decimal import Decimal

import pytest

from equity_payroll.utils.money import (
    dollars_to_cents,
    hourly_amount_in_cents,
    parse_hours,
    round_half_up,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("3:25", 205),
        ("03:25", 205),
        ("100:00", 6000),
        ("1", 60),
        ("0:05", 5),
    ],
)
def test_parse_hours(value, expected):
    assert parse_hours(value) == expected


@pytest.mark.parametrize("value", ["", "abc", "1:75", "-1:00"])
def test_parse_hours_rejects_malformed_values(value):
    with pytest.raises(ValueError):
        parse_hours(value)


def test_hourly_amount_uses_the_per_minute_rate():
    assert hourly_amount_in_cents(205, 6000) == 20500
    assert hourly_amount_in_cents(6000, 6000) == 600000
    # 1 minute at $0.50/h is 0.8333 cents
    assert hourly_amount_in_cents(1, 50) == 1


def test_round_half_up():
    assert round_half_up(Decimal("0.5")) == 1
    assert round_half_up(Decimal("2.5")) == 3
    assert round_half_up(Decimal("2.4999")) == 2


def test_dollars_to_cents():
    assert dollars_to_cents(Decimal("1000")) == 100000
    assert dollars_to_cents("12.345") == 1235
    assert dollars_to_cents(0) == 0
