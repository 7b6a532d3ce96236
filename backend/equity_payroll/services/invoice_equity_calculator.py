"""
Invoice equity calculator.

Splits an invoice total into a cash part and an equity part according to the
contractor's equity allocation for the invoice's calendar year.
"""

from decimal import Decimal
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from equity_payroll.core.exceptions import DataIntegrityError, InvalidInvoiceAmount
from equity_payroll.db.repositories.equity_allocation_repository import EquityAllocationRepository
from equity_payroll.models.company import Company
from equity_payroll.models.contractor import Contractor
from equity_payroll.schemas.invoice import InvoiceEquitySplit
from equity_payroll.services.base_service import BaseService
from equity_payroll.services.equity_grant_service import EquityGrantService
from equity_payroll.utils.money import (
    CENTS_PER_DOLLAR,
    dollars_to_cents,
    hourly_amount_in_cents,
    round_half_up,
)


def invoice_total_in_cents(
    contractor: Contractor,
    total_minutes: Optional[int] = None,
    amount_in_usd: Optional[Decimal] = None,
) -> int:
    """
    Billed total for an invoice.

    Hourly contractors bill ``total_minutes`` at their hourly rate; everyone
    else bills the flat amount they entered.
    """
    if contractor.is_hourly:
        if total_minutes is None:
            raise InvalidInvoiceAmount("Hours are required for hourly contracts")
        if total_minutes < 0:
            raise InvalidInvoiceAmount("Hours cannot be negative")
        return hourly_amount_in_cents(total_minutes, contractor.pay_rate_in_subunits)
    
    if amount_in_usd is None:
        raise InvalidInvoiceAmount("Amount is required for project-based contracts")
    total = dollars_to_cents(amount_in_usd)
    if total < 0:
        raise InvalidInvoiceAmount("Invoice total cannot be negative")
    return total


def split_invoice_amount(
    total_amount_in_usd_cents: int,
    equity_percentage: int,
    share_price_usd: Optional[Decimal] = None,
) -> InvoiceEquitySplit:
    """
    Split a total into cash and equity cents.

    The equity part is rounded half-up and cash takes the remainder, so the two
    always sum to the total. When a share price is known, the equity part is
    also expressed in options; if that rounds to zero options the invoice is
    paid entirely in cash.
    """
    if total_amount_in_usd_cents < 0:
        raise InvalidInvoiceAmount("Invoice total cannot be negative")
    if equity_percentage is None or not 0 <= equity_percentage <= 100:
        raise DataIntegrityError(
            "Equity percentage out of range",
            {"equity_percentage": equity_percentage},
        )
    
    if equity_percentage == 0:
        return _all_cash(total_amount_in_usd_cents)
    
    equity_cents = round_half_up(Decimal(total_amount_in_usd_cents) * equity_percentage / 100)
    
    equity_options = None
    if share_price_usd is not None:
        if share_price_usd <= 0:
            raise DataIntegrityError("Share price must be positive", {"share_price_usd": str(share_price_usd)})
        equity_options = round_half_up(Decimal(equity_cents) / (Decimal(share_price_usd) * CENTS_PER_DOLLAR))
        if equity_options <= 0:
            return _all_cash(total_amount_in_usd_cents)
    
    return InvoiceEquitySplit(
        total_amount_in_usd_cents=total_amount_in_usd_cents,
        cash_amount_in_cents=total_amount_in_usd_cents - equity_cents,
        equity_amount_in_cents=equity_cents,
        equity_percentage=equity_percentage,
        equity_amount_in_options=equity_options,
    )


def _all_cash(total_amount_in_usd_cents: int) -> InvoiceEquitySplit:
    return InvoiceEquitySplit(
        total_amount_in_usd_cents=total_amount_in_usd_cents,
        cash_amount_in_cents=total_amount_in_usd_cents,
        equity_amount_in_cents=0,
        equity_percentage=0,
        equity_amount_in_options=0,
    )


class InvoiceEquityCalculator(BaseService):
    """Looks up the allocation and share price for an invoice year and splits the total."""
    
    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.allocation_repo = EquityAllocationRepository(session)
        self.grant_service = EquityGrantService(session)
    
    async def calculate(
        self,
        company: Company,
        contractor: Contractor,
        invoice_year: int,
        total_amount_in_usd_cents: int,
    ) -> InvoiceEquitySplit:
        """Split an invoice total for ``contractor`` in ``invoice_year``."""
        equity_percentage = 0
        if company.equity_compensation_enabled:
            allocation = await self.allocation_repo.get_for_year(contractor.id, invoice_year)
            if allocation is not None and allocation.equity_percentage is not None:
                equity_percentage = allocation.equity_percentage
        
        share_price_usd = None
        if equity_percentage:
            share_price_usd = await self.grant_service.share_price_for_year(company, contractor.id, invoice_year)
        
        return split_invoice_amount(total_amount_in_usd_cents, equity_percentage, share_price_usd)
