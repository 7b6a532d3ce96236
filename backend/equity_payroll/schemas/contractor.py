"""
Contractor Pydantic schemas for request/response validation.
"""

from datetime import datetime
from pydantic import BaseModel, Field, model_validator
from typing import Optional, List

from equity_payroll.models.company_role_rate import PayRateType
from equity_payroll.utils.dates import to_naive_utc


class ContractorBase(BaseModel):
    """Base contractor schema with common fields."""
    name: str = Field(..., min_length=1, max_length=255)
    email: Optional[str] = Field(None, max_length=255)


class ContractorCreate(ContractorBase):
    """
    Schema for creating a contractor.

    Pay rate fields default to the role's current rate when omitted.
    """
    company_id: int
    company_role_id: int
    pay_rate_type: Optional[PayRateType] = None
    pay_rate_in_subunits: Optional[int] = Field(None, ge=0)
    started_at: Optional[datetime] = None
    ended_at: Optional[datetime] = None

    @model_validator(mode="after")
    def validate_dates(self) -> "ContractorCreate":
        """Validate that ended_at is after started_at if both are provided."""
        started_at = to_naive_utc(self.started_at)
        ended_at = to_naive_utc(self.ended_at)
        if started_at and ended_at and ended_at <= started_at:
            raise ValueError("End date must be after start date")
        return self


class ContractorEnd(BaseModel):
    """Schema for ending a contract. Defaults to now."""
    ended_at: Optional[datetime] = None


class ContractorResponse(ContractorBase):
    """Schema for contractor response."""
    id: int
    company_id: int
    company_role_id: int
    pay_rate_type: PayRateType
    pay_rate_in_subunits: int
    started_at: datetime
    ended_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ContractorListResponse(BaseModel):
    """Schema for contractor list response."""
    items: List[ContractorResponse]
    total: int
