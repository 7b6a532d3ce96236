"""
Company role model.

A role owns its rates. Rate accessors are forwarded explicitly to the current
rate, which must exist for every persisted role.
"""

from typing import Optional

from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship

from equity_payroll.core.exceptions import MissingRateError
from equity_payroll.db.base import Base, DeletableMixin, TimestampMixin
from equity_payroll.models.company_role_rate import CompanyRoleRate, PayRateType


class CompanyRole(DeletableMixin, TimestampMixin, Base):
    """A role a company hires contractors into."""
    
    __tablename__ = "company_roles"
    __table_args__ = (
        CheckConstraint(
            "expense_card_spending_limit_cents >= 0",
            name="ck_company_roles_spending_limit_non_negative",
        ),
    )
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    trial_enabled = Column(Boolean, nullable=False, default=False)
    actively_hiring = Column(Boolean, nullable=False, default=False, index=True)
    expense_card_spending_limit_cents = Column(Integer, nullable=False, default=0)
    
    # Relationships
    company = relationship("Company", back_populates="company_roles")
    rates = relationship(
        "CompanyRoleRate",
        back_populates="company_role",
        order_by="CompanyRoleRate.id.desc()",
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    company_workers = relationship("Contractor", back_populates="company_role")
    company_role_applications = relationship(
        "CompanyRoleApplication",
        back_populates="company_role",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    expense_cards = relationship("ExpenseCard", back_populates="company_role")
    
    @property
    def rate(self) -> CompanyRoleRate:
        """The current rate (highest id)."""
        if not self.rates:
            raise MissingRateError(self.id)
        return self.rates[0]
    
    def assign_rate(
        self,
        pay_rate_type: PayRateType,
        pay_rate_in_subunits: int,
        trial_pay_rate_in_subunits: Optional[int] = None,
    ) -> CompanyRoleRate:
        """Append a new current rate; earlier rates are kept as history."""
        rate = CompanyRoleRate(
            pay_rate_type=pay_rate_type,
            pay_rate_in_subunits=pay_rate_in_subunits,
            trial_pay_rate_in_subunits=trial_pay_rate_in_subunits,
        )
        self.rates.insert(0, rate)
        return rate
    
    @property
    def pay_rate_in_subunits(self) -> int:
        return self.rate.pay_rate_in_subunits
    
    @property
    def pay_rate_type(self) -> PayRateType:
        return self.rate.pay_rate_type
    
    @property
    def trial_pay_rate_in_subunits(self) -> Optional[int]:
        return self.rate.trial_pay_rate_in_subunits
    
    @property
    def is_hourly(self) -> bool:
        return self.rate.is_hourly
    
    @property
    def is_project_based(self) -> bool:
        return self.rate.is_project_based
    
    @property
    def is_salary(self) -> bool:
        return self.rate.is_salary
    
    @property
    def expense_card_has_limit(self) -> bool:
        return (self.expense_card_spending_limit_cents or 0) > 0
