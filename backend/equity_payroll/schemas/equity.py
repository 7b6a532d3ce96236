"""
Equity allocation and grant Pydantic schemas.
"""

from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Optional, List

from equity_payroll.models.equity_allocation import EquityAllocationLockState, EquityAllocationStatus


class EquityAllocationUpdate(BaseModel):
    """Schema for electing an equity percentage for a year."""
    equity_percentage: int = Field(..., ge=0, le=100)


class EquityAllocationResponse(BaseModel):
    """Schema for an equity allocation."""
    id: int
    company_worker_id: int
    year: int
    equity_percentage: Optional[int] = None
    locked: bool
    status: EquityAllocationStatus
    lock_state: EquityAllocationLockState

    class Config:
        from_attributes = True


class EquityAllocationListResponse(BaseModel):
    items: List[EquityAllocationResponse]
    total: int


class EquityGrantCreate(BaseModel):
    """Schema for recording an equity grant."""
    period_year: int = Field(..., ge=1900, le=9999)
    share_price_usd: Decimal = Field(..., gt=0)
    number_of_shares: int = Field(0, ge=0)
    issued_at: Optional[datetime] = None


class EquityGrantResponse(EquityGrantCreate):
    """Schema for an equity grant."""
    id: int
    company_worker_id: int

    class Config:
        from_attributes = True
