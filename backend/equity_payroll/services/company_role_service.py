"""
Company role service with business logic.
"""

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from equity_payroll.core.exceptions import NotFoundError, RecordInvalid
from equity_payroll.db.repositories.company_repository import CompanyRepository
from equity_payroll.db.repositories.company_role_repository import CompanyRoleRepository
from equity_payroll.db.repositories.company_role_rate_repository import CompanyRoleRateRepository
from equity_payroll.db.repositories.contractor_repository import ContractorRepository
from equity_payroll.models.company_role import CompanyRole
from equity_payroll.schemas.company_role import (
    CompanyRoleCreate,
    CompanyRoleUpdate,
    CompanyRoleResponse,
    CompanyRoleRateResponse,
)
from equity_payroll.services.base_service import BaseService
from equity_payroll.services.company_role_rules import validate_company_role
from equity_payroll.utils.dates import to_naive_utc, utcnow

logger = logging.getLogger(__name__)

ROLE_FIELDS = (
    "company_id",
    "name",
    "trial_enabled",
    "actively_hiring",
    "expense_card_spending_limit_cents",
    "deleted_at",
)


class CompanyRoleService(BaseService):
    """Service for company role operations."""
    
    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.company_repo = CompanyRepository(session)
        self.role_repo = CompanyRoleRepository(session)
        self.rate_repo = CompanyRoleRateRepository(session)
        self.contractor_repo = ContractorRepository(session)
    
    async def create_role(self, role_data: CompanyRoleCreate) -> CompanyRoleResponse:
        """Create a new role together with its first rate."""
        company = await self.company_repo.get(role_data.company_id)
        if not company:
            raise NotFoundError("Company", role_data.company_id)
        
        role_dict = role_data.model_dump(exclude={"rate"})
        role = CompanyRole(**role_dict)
        role.assign_rate(**role_data.rate.model_dump())
        
        self._check(role)
        await self.role_repo.add(role)
        await self.session.commit()
        
        logger.info(f"Created company role {role.id}", extra={"company_id": role.company_id})
        return CompanyRoleResponse.model_validate(role)
    
    async def get_role(self, role_id: int) -> Optional[CompanyRoleResponse]:
        """Get role by ID."""
        role = await self.role_repo.get(role_id)
        if not role:
            return None
        return CompanyRoleResponse.model_validate(role)
    
    async def list_roles(
        self,
        company_id: Optional[int] = None,
        actively_hiring: Optional[bool] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> tuple[List[CompanyRoleResponse], int]:
        """List live roles with optional filters."""
        roles = await self.role_repo.list_for_company(
            company_id=company_id,
            actively_hiring=actively_hiring,
            skip=skip,
            limit=limit,
        )
        return [CompanyRoleResponse.model_validate(role) for role in roles], len(roles)
    
    async def list_actively_hiring(self, company_id: Optional[int] = None) -> List[CompanyRoleResponse]:
        """Roles that are actively hiring."""
        roles = await self.role_repo.list_actively_hiring(company_id)
        return [CompanyRoleResponse.model_validate(role) for role in roles]
    
    async def list_rates(self, role_id: int) -> Optional[List[CompanyRoleRateResponse]]:
        """Rate history of a role, newest first."""
        role = await self.role_repo.get(role_id)
        if not role:
            return None
        rates = await self.rate_repo.list_for_role(role_id)
        return [CompanyRoleRateResponse.model_validate(rate) for rate in rates]
    
    async def update_role(
        self,
        role_id: int,
        role_data: CompanyRoleUpdate,
    ) -> Optional[CompanyRoleResponse]:
        """
        Update a role.
        
        A ``rate`` in the payload becomes the new current rate; the previous
        rates are kept. The rules are checked against the updated state before
        the role is touched, so a rejected update leaves the session clean.
        
        Raises:
            RecordInvalid: If the updated role breaks a role rule
        """
        role = await self.role_repo.get(role_id)
        if not role:
            return None
        
        update_dict = role_data.model_dump(exclude_unset=True, exclude={"rate"})
        rate_dict = role_data.rate.model_dump() if role_data.rate is not None else None
        self._check(self._candidate(role, update_dict, rate_dict))
        
        for field, value in update_dict.items():
            setattr(role, field, value)
        if rate_dict is not None:
            role.assign_rate(**rate_dict)
        
        await self.session.flush()
        await self.session.commit()
        return CompanyRoleResponse.model_validate(role)
    
    async def delete_role(self, role_id: int, deleted_at: Optional[datetime] = None) -> bool:
        """
        Soft-delete a role.
        
        Raises:
            RecordInvalid: If the role still has active contractors
        """
        role = await self.role_repo.get(role_id)
        if not role:
            return False
        
        deleted_at = to_naive_utc(deleted_at) or utcnow()
        active_contractors = await self.contractor_repo.count_active_for_role(role.id, utcnow())
        self._check(self._candidate(role, {"deleted_at": deleted_at}), active_contractors)
        
        role.deleted_at = deleted_at
        await self.session.flush()
        await self.session.commit()
        
        logger.info(f"Soft-deleted company role {role_id}", extra={"deleted_at": deleted_at.isoformat()})
        return True
    
    def _candidate(self, role: CompanyRole, changes: dict, rate: Optional[dict] = None) -> CompanyRole:
        """Transient copy of ``role`` with ``changes`` applied; never added to the session."""
        values = {field: getattr(role, field) for field in ROLE_FIELDS}
        values.update(changes)
        candidate = CompanyRole(**values)
        if rate is None:
            rate = {
                "pay_rate_type": role.pay_rate_type,
                "pay_rate_in_subunits": role.pay_rate_in_subunits,
                "trial_pay_rate_in_subunits": role.trial_pay_rate_in_subunits,
            }
        candidate.assign_rate(**rate)
        return candidate
    
    def _check(self, role: CompanyRole, active_contractors: int = 0) -> None:
        violations = validate_company_role(role, active_contractors)
        if violations:
            raise RecordInvalid("CompanyRole", [violation.value for violation in violations])
