"""
Company Pydantic schemas for request/response validation.
"""

from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Optional

from equity_payroll.core.config import settings


class CompanyBase(BaseModel):
    """Base company schema with common fields."""
    name: str = Field(..., min_length=1, max_length=255)
    equity_compensation_enabled: bool = False
    fmv_per_share_in_usd: Optional[Decimal] = Field(None, gt=0)
    required_invoice_approval_count: int = Field(
        default_factory=lambda: settings.DEFAULT_REQUIRED_INVOICE_APPROVALS,
        ge=1,
    )


class CompanyCreate(CompanyBase):
    """Schema for creating a company."""
    pass


class CompanyResponse(CompanyBase):
    """Schema for company response."""
    id: int
    
    class Config:
        from_attributes = True
