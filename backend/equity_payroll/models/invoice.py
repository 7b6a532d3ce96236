"""
Invoice model.
"""

from sqlalchemy import (
    Column,
    Integer,
    BigInteger,
    String,
    Text,
    Date,
    ForeignKey,
    CheckConstraint,
    Enum as SQLEnum,
)
from sqlalchemy.orm import relationship
import enum

from equity_payroll.db.base import Base, TimestampMixin


class InvoiceStatus(str, enum.Enum):
    """Invoice status enumeration."""
    RECEIVED = "received"
    APPROVED = "approved"
    REJECTED = "rejected"
    PAID = "paid"


class Invoice(TimestampMixin, Base):
    """An invoice for hours worked or a project fee, split into cash and equity."""
    
    __tablename__ = "invoices"
    __table_args__ = (
        CheckConstraint(
            "cash_amount_in_cents + equity_amount_in_cents = total_amount_in_usd_cents",
            name="ck_invoices_split_sums_to_total",
        ),
        CheckConstraint("total_amount_in_usd_cents >= 0", name="ck_invoices_total_non_negative"),
    )
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False, index=True)
    company_worker_id = Column(Integer, ForeignKey("company_workers.id"), nullable=False, index=True)
    invoice_number = Column(String(50), nullable=False)
    invoice_date = Column(Date, nullable=False, index=True)
    description = Column(String(500), nullable=False)
    notes = Column(Text, nullable=True)
    total_minutes = Column(Integer, nullable=True)  # hourly invoices only
    total_amount_in_usd_cents = Column(BigInteger, nullable=False)
    cash_amount_in_cents = Column(BigInteger, nullable=False)
    equity_amount_in_cents = Column(BigInteger, nullable=False, default=0)
    equity_amount_in_options = Column(Integer, nullable=False, default=0)
    equity_percentage = Column(Integer, nullable=False, default=0)
    status = Column(SQLEnum(InvoiceStatus), nullable=False, default=InvoiceStatus.RECEIVED, index=True)
    invoice_approvals_count = Column(Integer, nullable=False, default=0)
    
    # Relationships
    company = relationship("Company", back_populates="invoices")
    contractor = relationship("Contractor", back_populates="invoices")
