"""
Save-time rules for company roles.

Each check returns the violated rule (or ``None``). The role service runs
``validate_company_role`` before every save, including the soft delete.
"""

import enum
from typing import List, Optional

from equity_payroll.core.exceptions import MissingRateError
from equity_payroll.models.company_role import CompanyRole


class RoleRuleViolation(str, enum.Enum):
    """Violated role rule; the value is the user-facing message."""
    TRIAL_REQUIRES_HOURLY = "Can only set trials with hourly contracts"
    ACTIVE_CONTRACTORS = "Cannot delete role with active contractors"


def check_trial_eligibility(role: CompanyRole) -> Optional[RoleRuleViolation]:
    """Trials may only be enabled on roles whose current rate is hourly."""
    if role.trial_enabled and not role.is_hourly:
        return RoleRuleViolation.TRIAL_REQUIRES_HOURLY
    return None


def check_role_deletion(role: CompanyRole, active_contractor_count: int) -> Optional[RoleRuleViolation]:
    """
    Pre-condition for a transition to deleted.

    Args:
        role: Role about to be saved
        active_contractor_count: Contractors of the role whose contract has not ended
    """
    if role.is_deleted and active_contractor_count > 0:
        return RoleRuleViolation.ACTIVE_CONTRACTORS
    return None


def validate_company_role(role: CompanyRole, active_contractor_count: int = 0) -> List[RoleRuleViolation]:
    """Run every role rule. Raises MissingRateError if the role has no rate."""
    if not role.rates:
        raise MissingRateError(role.id)
    violations = [
        check_trial_eligibility(role),
        check_role_deletion(role, active_contractor_count),
    ]
    return [violation for violation in violations if violation is not None]
