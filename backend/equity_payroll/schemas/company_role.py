"""
Company role Pydantic schemas for request/response validation.
"""

from datetime import datetime
from pydantic import BaseModel, Field
from typing import Optional, List

from equity_payroll.models.company_role_rate import PayRateType


class CompanyRoleRateBase(BaseModel):
    """Pay rate attached to a role."""
    pay_rate_type: PayRateType = PayRateType.HOURLY
    pay_rate_in_subunits: int = Field(..., ge=0)
    trial_pay_rate_in_subunits: Optional[int] = Field(None, ge=0)


class CompanyRoleRateCreate(CompanyRoleRateBase):
    """Create schema for a role rate."""
    pass


class CompanyRoleRateResponse(CompanyRoleRateBase):
    """Response schema for a role rate."""
    id: int

    class Config:
        from_attributes = True


class CompanyRoleBase(BaseModel):
    """Base company role schema with common fields."""
    name: str = Field(..., min_length=1, max_length=255)
    trial_enabled: bool = False
    actively_hiring: bool = False
    expense_card_spending_limit_cents: int = Field(0, ge=0)


class CompanyRoleCreate(CompanyRoleBase):
    """Schema for creating a role. A rate is required."""
    company_id: int
    rate: CompanyRoleRateCreate


class CompanyRoleUpdate(BaseModel):
    """Schema for updating a role. Sending ``rate`` appends a new current rate."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    trial_enabled: Optional[bool] = None
    actively_hiring: Optional[bool] = None
    expense_card_spending_limit_cents: Optional[int] = Field(None, ge=0)
    rate: Optional[CompanyRoleRateCreate] = None


class CompanyRoleResponse(CompanyRoleBase):
    """Schema for role response, including the forwarded rate attributes."""
    id: int
    company_id: int
    pay_rate_type: PayRateType
    pay_rate_in_subunits: int
    trial_pay_rate_in_subunits: Optional[int] = None
    expense_card_has_limit: bool
    rate: CompanyRoleRateResponse
    deleted_at: Optional[datetime] = None
    
    class Config:
        from_attributes = True


class CompanyRoleListResponse(BaseModel):
    """Schema for role list response."""
    items: List[CompanyRoleResponse]
    total: int


class CompanyRoleRateListResponse(BaseModel):
    """Rate history of a role, newest first."""
    items: List[CompanyRoleRateResponse]
    total: int
