"""
Applications submitted for an open company role.
"""

from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship

from equity_payroll.db.base import Base, TimestampMixin


class CompanyRoleApplication(TimestampMixin, Base):
    """A candidate's application to a company role."""

    __tablename__ = "company_role_applications"

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_role_id = Column(
        Integer, ForeignKey("company_roles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    company_role = relationship("CompanyRole", back_populates="company_role_applications")
