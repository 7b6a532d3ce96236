"""
Tests for the cash/equity split of invoice totals.
"""

from decimal import Decimal

import pytest

from equity_payroll.core.exceptions import DataIntegrityError, InvalidInvoiceAmount
from equity_payroll.models import Contractor, PayRateType
from equity_payroll.services.invoice_equity_calculator import (
    invoice_total_in_cents,
    split_invoice_amount,
)


def test_hourly_invoice_with_twenty_percent_equity():
    contractor = Contractor(pay_rate_type=PayRateType.HOURLY, pay_rate_in_subunits=6000)
    total = invoice_total_in_cents(contractor, total_minutes=205)

    split = split_invoice_amount(total, 20)

    assert split.total_amount_in_usd_cents == 20500
    assert split.equity_amount_in_cents == 4100
    assert split.cash_amount_in_cents == 16400
    assert split.equity_percentage == 20


def test_project_based_invoice_with_half_in_equity():
    contractor = Contractor(pay_rate_type=PayRateType.PROJECT_BASED, pay_rate_in_subunits=100000)
    total = invoice_total_in_cents(contractor, amount_in_usd=Decimal("1000"))

    split = split_invoice_amount(total, 50)

    assert split.total_amount_in_usd_cents == 100000
    assert split.equity_amount_in_cents == 50000
    assert split.cash_amount_in_cents == 50000


def test_hundred_hours_with_twenty_percent_equity():
    contractor = Contractor(pay_rate_type=PayRateType.HOURLY, pay_rate_in_subunits=6000)
    total = invoice_total_in_cents(contractor, total_minutes=6000)

    split = split_invoice_amount(total, 20, share_price_usd=Decimal("300"))

    assert split.total_amount_in_usd_cents == 600000
    assert split.equity_amount_in_cents == 120000
    assert split.cash_amount_in_cents == 480000
    assert split.equity_amount_in_options == 4


def test_zero_percent_is_all_cash():
    split = split_invoice_amount(20500, 0)

    assert split.equity_percentage == 0
    assert split.equity_amount_in_cents == 0
    assert split.cash_amount_in_cents == 20500


def test_equity_worth_less_than_one_option_is_paid_in_cash():
    # $41 of equity at $300/share rounds to zero options
    split = split_invoice_amount(20500, 20, share_price_usd=Decimal("300"))

    assert split.equity_percentage == 0
    assert split.equity_amount_in_cents == 0
    assert split.equity_amount_in_options == 0
    assert split.cash_amount_in_cents == 20500


def test_without_share_price_no_option_count_is_computed():
    split = split_invoice_amount(20500, 20)

    assert split.equity_amount_in_options is None
    assert split.equity_amount_in_cents == 4100


def test_non_exact_splits_round_half_up():
    assert split_invoice_amount(1, 50).equity_amount_in_cents == 1
    assert split_invoice_amount(3, 50).equity_amount_in_cents == 2
    assert split_invoice_amount(333, 33).equity_amount_in_cents == 110


@pytest.mark.parametrize("total", [0, 1, 7, 99, 12345, 600001])
@pytest.mark.parametrize("percentage", [0, 1, 13, 33, 50, 99, 100])
def test_cash_and_equity_sum_to_total(total, percentage):
    split = split_invoice_amount(total, percentage)

    assert split.cash_amount_in_cents + split.equity_amount_in_cents == total
    assert split.cash_amount_in_cents >= 0
    assert split.equity_amount_in_cents >= 0


def test_negative_total_is_rejected():
    with pytest.raises(InvalidInvoiceAmount):
        split_invoice_amount(-1, 20)


@pytest.mark.parametrize("percentage", [-1, 101])
def test_out_of_range_percentage_is_a_data_integrity_error(percentage):
    with pytest.raises(DataIntegrityError):
        split_invoice_amount(1000, percentage)


def test_hourly_invoice_requires_minutes():
    contractor = Contractor(pay_rate_type=PayRateType.HOURLY, pay_rate_in_subunits=6000)

    with pytest.raises(InvalidInvoiceAmount):
        invoice_total_in_cents(contractor, amount_in_usd=Decimal("100"))


def test_project_invoice_requires_amount():
    contractor = Contractor(pay_rate_type=PayRateType.PROJECT_BASED, pay_rate_in_subunits=100000)

    with pytest.raises(InvalidInvoiceAmount):
        invoice_total_in_cents(contractor, total_minutes=60)
