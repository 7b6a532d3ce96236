"""
Company role rate model.
A role keeps every rate it ever had; the row with the highest id is the current one.
"""

from sqlalchemy import Column, Integer, ForeignKey, CheckConstraint, Enum as SQLEnum
from sqlalchemy.orm import relationship
import enum

from equity_payroll.db.base import Base, TimestampMixin


class PayRateType(str, enum.Enum):
    """How a contractor is compensated."""
    HOURLY = "hourly"
    PROJECT_BASED = "project_based"
    SALARY = "salary"


class CompanyRoleRate(TimestampMixin, Base):
    """Pay rate for a company role."""

    __tablename__ = "company_role_rates"
    __table_args__ = (
        CheckConstraint("pay_rate_in_subunits >= 0", name="ck_company_role_rates_pay_rate_non_negative"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_role_id = Column(Integer, ForeignKey("company_roles.id", ondelete="CASCADE"), nullable=False, index=True)
    pay_rate_type = Column(SQLEnum(PayRateType), nullable=False, default=PayRateType.HOURLY)
    pay_rate_in_subunits = Column(Integer, nullable=False)
    trial_pay_rate_in_subunits = Column(Integer, nullable=True)

    # Relationships
    company_role = relationship("CompanyRole", back_populates="rates")

    @property
    def is_hourly(self) -> bool:
        return self.pay_rate_type == PayRateType.HOURLY

    @property
    def is_project_based(self) -> bool:
        return self.pay_rate_type == PayRateType.PROJECT_BASED

    @property
    def is_salary(self) -> bool:
        return self.pay_rate_type == PayRateType.SALARY
