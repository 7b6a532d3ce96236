"""
Money and time arithmetic for invoices.
All amounts are integer cents; rounding is ROUND_HALF_UP throughout.
"""

import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

CENTS_PER_DOLLAR = 100
MINUTES_PER_HOUR = 60

Number = Union[int, str, Decimal]

_HOURS_PATTERN = re.compile(r"^\s*(\d+)(?::([0-5]?\d))?\s*$")


def round_half_up(value: Decimal) -> int:
    """Round a decimal to the nearest integer, halves away from zero."""
    return int(Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def dollars_to_cents(amount: Number) -> int:
    """
    Convert a dollar amount to cents.

    Args:
        amount: Amount in USD (e.g. ``Decimal("1000")`` or ``"12.345"``)

    Returns:
        Amount in cents, rounded half-up
    """
    return round_half_up(Decimal(str(amount)) * CENTS_PER_DOLLAR)


def hourly_amount_in_cents(total_minutes: int, pay_rate_in_subunits: int) -> int:
    """Amount billed for ``total_minutes`` at an hourly rate given in cents."""
    return round_half_up(Decimal(total_minutes) * Decimal(pay_rate_in_subunits) / MINUTES_PER_HOUR)


def parse_hours(value: str) -> int:
    """
    Parse an ``HH:MM`` (or bare ``HH``) duration into minutes.

    >>> parse_hours("3:25")
    205
    >>> parse_hours("100:00")
    6000
    """
    match = _HOURS_PATTERN.match(value or "")
    if not match:
        raise ValueError(f"Invalid hours value: {value!r}")
    hours = int(match.group(1))
    minutes = int(match.group(2) or 0)
    return hours * MINUTES_PER_HOUR + minutes
