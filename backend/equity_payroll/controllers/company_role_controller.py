"""
Company role controller.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from equity_payroll.controllers.base_controller import BaseController
from equity_payroll.services.company_role_service import CompanyRoleService
from equity_payroll.schemas.company_role import (
    CompanyRoleCreate,
    CompanyRoleUpdate,
    CompanyRoleResponse,
    CompanyRoleListResponse,
    CompanyRoleRateListResponse,
)


class CompanyRoleController(BaseController):
    """Controller for company role operations."""
    
    def __init__(self, session: AsyncSession):
        self.role_service = CompanyRoleService(session)
    
    async def create_role(self, role_data: CompanyRoleCreate) -> CompanyRoleResponse:
        """Create a new role."""
        return await self.role_service.create_role(role_data)
    
    async def get_role(self, role_id: int) -> Optional[CompanyRoleResponse]:
        """Get role by ID."""
        return await self.role_service.get_role(role_id)
    
    async def list_roles(
        self,
        company_id: Optional[int] = None,
        actively_hiring: Optional[bool] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> CompanyRoleListResponse:
        """List roles with optional filters."""
        roles, total = await self.role_service.list_roles(
            company_id=company_id,
            actively_hiring=actively_hiring,
            skip=skip,
            limit=limit,
        )
        return CompanyRoleListResponse(items=roles, total=total)
    
    async def list_actively_hiring(self, company_id: Optional[int] = None) -> CompanyRoleListResponse:
        """Every role that is actively hiring."""
        roles = await self.role_service.list_actively_hiring(company_id)
        return CompanyRoleListResponse(items=roles, total=len(roles))
    
    async def list_rates(self, role_id: int) -> Optional[CompanyRoleRateListResponse]:
        """Rate history of a role."""
        rates = await self.role_service.list_rates(role_id)
        if rates is None:
            return None
        return CompanyRoleRateListResponse(items=rates, total=len(rates))
    
    async def update_role(
        self,
        role_id: int,
        role_data: CompanyRoleUpdate,
    ) -> Optional[CompanyRoleResponse]:
        """Update a role."""
        return await self.role_service.update_role(role_id, role_data)
    
    async def delete_role(self, role_id: int) -> bool:
        """Soft-delete a role."""
        return await self.role_service.delete_role(role_id)
