"""
Contractor model (company workers).
"""

from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Enum as SQLEnum, or_
from sqlalchemy.orm import relationship

from equity_payroll.db.base import Base, TimestampMixin
from equity_payroll.models.company_role_rate import PayRateType


class Contractor(TimestampMixin, Base):
    """A worker contracted by a company into one of its roles."""
    
    __tablename__ = "company_workers"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False, index=True)
    company_role_id = Column(Integer, ForeignKey("company_roles.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True)
    pay_rate_type = Column(SQLEnum(PayRateType), nullable=False, default=PayRateType.HOURLY)
    pay_rate_in_subunits = Column(Integer, nullable=False)
    started_at = Column(DateTime, nullable=False)
    ended_at = Column(DateTime, nullable=True)
    
    # Relationships
    company = relationship("Company", back_populates="company_workers")
    company_role = relationship("CompanyRole", back_populates="company_workers")
    equity_allocations = relationship("EquityAllocation", back_populates="contractor", cascade="all, delete-orphan")
    equity_grants = relationship("EquityGrant", back_populates="contractor", cascade="all, delete-orphan")
    invoices = relationship("Invoice", back_populates="contractor")
    
    @classmethod
    def active_at(cls, at: datetime):
        """SQL criterion for contracts that have not ended at ``at``."""
        return or_(cls.ended_at.is_(None), cls.ended_at > at)
    
    @property
    def is_hourly(self) -> bool:
        return self.pay_rate_type == PayRateType.HOURLY
    
    @property
    def is_project_based(self) -> bool:
        return self.pay_rate_type == PayRateType.PROJECT_BASED
