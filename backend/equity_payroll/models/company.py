"""
Company model.
"""

from sqlalchemy import Column, Integer, String, Boolean, Numeric
from sqlalchemy.orm import relationship

from equity_payroll.core.config import settings
from equity_payroll.db.base import Base, TimestampMixin


class Company(TimestampMixin, Base):
    """A company that engages contractors and pays invoices partly in equity."""
    
    __tablename__ = "companies"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    equity_compensation_enabled = Column(Boolean, nullable=False, default=False)
    fmv_per_share_in_usd = Column(Numeric(20, 10), nullable=True)  # fallback share price
    required_invoice_approval_count = Column(
        Integer,
        nullable=False,
        default=lambda: settings.DEFAULT_REQUIRED_INVOICE_APPROVALS,
    )
    
    # Relationships
    company_roles = relationship("CompanyRole", back_populates="company")
    company_workers = relationship("Contractor", back_populates="company")
    invoices = relationship("Invoice", back_populates="company")
