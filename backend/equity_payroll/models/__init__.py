"""
Database models.
Import all models here to ensure they're registered with Base.
"""

from equity_payroll.models.company import Company
from equity_payroll.models.company_role_rate import CompanyRoleRate, PayRateType
from equity_payroll.models.company_role import CompanyRole
from equity_payroll.models.company_role_application import CompanyRoleApplication
from equity_payroll.models.contractor import Contractor
from equity_payroll.models.expense_card import ExpenseCard
from equity_payroll.models.equity_allocation import (
    EquityAllocation,
    EquityAllocationLockState,
    EquityAllocationStatus,
)
from equity_payroll.models.equity_grant import EquityGrant
from equity_payroll.models.invoice import Invoice, InvoiceStatus

__all__ = [
    "Company",
    "CompanyRole",
    "CompanyRoleRate",
    "PayRateType",
    "CompanyRoleApplication",
    "Contractor",
    "ExpenseCard",
    "EquityAllocation",
    "EquityAllocationLockState",
    "EquityAllocationStatus",
    "EquityGrant",
    "Invoice",
    "InvoiceStatus",
]
