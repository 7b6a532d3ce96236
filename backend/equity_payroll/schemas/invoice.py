"""
Invoice Pydantic schemas for request/response validation.
"""

from datetime import date
from decimal import Decimal
from pydantic import BaseModel, Field, model_validator
from typing import Optional, List

from equity_payroll.models.invoice import InvoiceStatus
from equity_payroll.utils.money import parse_hours


class InvoiceEquitySplit(BaseModel):
    """Cash/equity split of an invoice total, in cents."""
    total_amount_in_usd_cents: int
    cash_amount_in_cents: int
    equity_amount_in_cents: int
    equity_percentage: int
    equity_amount_in_options: Optional[int] = None


class EquityLockConfirmation(BaseModel):
    """Text of the dialog shown before an equity allocation is locked."""
    year: int
    equity_percentage: int
    title: str
    body: str
    confirm_label: str
    change_selection_url: str


class InvoiceCreate(BaseModel):
    """
    Schema for creating (or previewing) an invoice.

    Hourly contractors send ``total_minutes`` or ``hours`` as ``HH:MM``;
    project-based contractors send ``amount_in_usd``.
    """
    company_worker_id: int
    invoice_date: date
    description: str = Field(..., min_length=1, max_length=500)
    notes: Optional[str] = None
    total_minutes: Optional[int] = Field(None, ge=0)
    hours: Optional[str] = Field(None, description="Duration as HH:MM")
    amount_in_usd: Optional[Decimal] = Field(None, ge=0)
    confirm_equity_lock: bool = False

    @model_validator(mode="after")
    def resolve_hours(self) -> "InvoiceCreate":
        """Convert ``hours`` into ``total_minutes``."""
        if self.hours is not None:
            if self.total_minutes is not None:
                raise ValueError("Send either hours or total_minutes, not both")
            self.total_minutes = parse_hours(self.hours)
        return self


class InvoicePreviewResponse(InvoiceEquitySplit):
    """Totals shown before an invoice is sent."""
    total_minutes: Optional[int] = None
    requires_equity_lock_confirmation: bool = False
    equity_lock_confirmation: Optional[EquityLockConfirmation] = None


class InvoiceResponse(BaseModel):
    """Schema for invoice response."""
    id: int
    company_id: int
    company_worker_id: int
    invoice_number: str
    invoice_date: date
    description: str
    notes: Optional[str] = None
    total_minutes: Optional[int] = None
    total_amount_in_usd_cents: int
    cash_amount_in_cents: int
    equity_amount_in_cents: int
    equity_amount_in_options: int
    equity_percentage: int
    status: InvoiceStatus
    invoice_approvals_count: int
    required_approvals_count: int
    status_label: str

    class Config:
        from_attributes = True


class InvoiceListResponse(BaseModel):
    """Schema for invoice list response."""
    items: List[InvoiceResponse]
    total: int
