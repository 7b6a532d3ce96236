"""
Equity grant model. Only the per-year share price is used by invoicing.
"""

from sqlalchemy import Column, Integer, Numeric, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from equity_payroll.db.base import Base, TimestampMixin


class EquityGrant(TimestampMixin, Base):
    """Options granted to a contractor for a period year."""

    __tablename__ = "equity_grants"

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_worker_id = Column(
        Integer, ForeignKey("company_workers.id", ondelete="CASCADE"), nullable=False, index=True
    )
    period_year = Column(Integer, nullable=False, index=True)
    share_price_usd = Column(Numeric(20, 10), nullable=False)
    number_of_shares = Column(Integer, nullable=False, default=0)
    issued_at = Column(DateTime, nullable=True)

    contractor = relationship("Contractor", back_populates="equity_grants")
