"""
Expense cards issued to contractors of a role.
"""

from sqlalchemy import Column, Integer, String, Boolean, ForeignKey
from sqlalchemy.orm import relationship

from equity_payroll.db.base import Base, TimestampMixin


class ExpenseCard(TimestampMixin, Base):
    """A spending card whose limit comes from the contractor's role."""

    __tablename__ = "expense_cards"

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_role_id = Column(Integer, ForeignKey("company_roles.id"), nullable=False, index=True)
    company_worker_id = Column(Integer, ForeignKey("company_workers.id"), nullable=False, index=True)
    processor_reference = Column(String(255), nullable=True)
    active = Column(Boolean, nullable=False, default=True)

    company_role = relationship("CompanyRole", back_populates="expense_cards")
    contractor = relationship("Contractor")
