"""
Company role repository for database operations.
"""

from typing import Optional, List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from equity_payroll.db.repositories.base_repository import BaseRepository
from equity_payroll.models.company_role import CompanyRole


class CompanyRoleRepository(BaseRepository[CompanyRole]):
    """Repository for company role operations. Soft-deleted roles are hidden."""
    
    def __init__(self, session: AsyncSession):
        super().__init__(CompanyRole, session)
    
    async def get(self, id: int) -> Optional[CompanyRole]:
        """Get a live role by ID."""
        result = await self.session.execute(
            select(CompanyRole).where(CompanyRole.id == id, CompanyRole.alive())
        )
        return result.scalar_one_or_none()
    
    def _alive_query(self, company_id: Optional[int] = None, actively_hiring: Optional[bool] = None):
        query = select(CompanyRole).where(CompanyRole.alive())
        if company_id is not None:
            query = query.where(CompanyRole.company_id == company_id)
        if actively_hiring is not None:
            query = query.where(CompanyRole.actively_hiring == actively_hiring)
        return query.order_by(CompanyRole.id)
    
    async def list_for_company(
        self,
        company_id: Optional[int] = None,
        actively_hiring: Optional[bool] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[CompanyRole]:
        """List live roles, optionally scoped to a company and hiring state."""
        query = self._alive_query(company_id, actively_hiring).offset(skip).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())
    
    async def list_actively_hiring(self, company_id: Optional[int] = None) -> List[CompanyRole]:
        """Every live role that is actively hiring."""
        result = await self.session.execute(self._alive_query(company_id, actively_hiring=True))
        return list(result.scalars().all())
