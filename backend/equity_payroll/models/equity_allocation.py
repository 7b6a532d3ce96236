"""
Equity allocation model.

One row per contractor and calendar year. The allocation moves one way only:
unset -> unlocked -> locked. A locked allocation is never modified again.
"""

from sqlalchemy import (
    Column,
    Integer,
    Boolean,
    ForeignKey,
    UniqueConstraint,
    CheckConstraint,
    Enum as SQLEnum,
)
from sqlalchemy.orm import relationship
import enum

from equity_payroll.db.base import Base, TimestampMixin


class EquityAllocationStatus(str, enum.Enum):
    """Review status of an allocation."""
    PENDING_CONFIRMATION = "pending_confirmation"
    APPROVED = "approved"


class EquityAllocationLockState(str, enum.Enum):
    """Lock state machine for a contractor-year."""
    UNSET = "unset"
    UNLOCKED = "unlocked"
    LOCKED = "locked"


class EquityAllocation(TimestampMixin, Base):
    """A contractor's elected share of invoice value to be paid in equity for a year."""

    __tablename__ = "equity_allocations"
    __table_args__ = (
        UniqueConstraint("company_worker_id", "year", name="uq_equity_allocation_worker_year"),
        CheckConstraint(
            "equity_percentage >= 0 AND equity_percentage <= 100",
            name="ck_equity_allocations_percentage_range",
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_worker_id = Column(
        Integer, ForeignKey("company_workers.id", ondelete="CASCADE"), nullable=False, index=True
    )
    year = Column(Integer, nullable=False)
    equity_percentage = Column(Integer, nullable=True)
    locked = Column(Boolean, nullable=False, default=False)
    status = Column(
        SQLEnum(EquityAllocationStatus),
        nullable=False,
        default=EquityAllocationStatus.PENDING_CONFIRMATION,
    )

    # Relationships
    contractor = relationship("Contractor", back_populates="equity_allocations")

    @property
    def lock_state(self) -> EquityAllocationLockState:
        if self.locked:
            return EquityAllocationLockState.LOCKED
        if self.equity_percentage is None:
            return EquityAllocationLockState.UNSET
        return EquityAllocationLockState.UNLOCKED
