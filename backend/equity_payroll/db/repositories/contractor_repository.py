"""
Contractor repository for database operations.
"""

from datetime import datetime
from typing import Optional, List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func

from equity_payroll.db.repositories.base_repository import BaseRepository
from equity_payroll.models.contractor import Contractor


class ContractorRepository(BaseRepository[Contractor]):
    """Repository for contractor operations."""
    
    def __init__(self, session: AsyncSession):
        super().__init__(Contractor, session)
    
    async def count_active_for_role(self, company_role_id: int, at: datetime) -> int:
        """Count contractors of a role whose contract has not ended at ``at``."""
        result = await self.session.execute(
            select(func.count())
            .select_from(Contractor)
            .where(
                Contractor.company_role_id == company_role_id,
                Contractor.active_at(at),
            )
        )
        return result.scalar_one()
    
    async def list_for_company(
        self,
        company_id: Optional[int] = None,
        company_role_id: Optional[int] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Contractor]:
        """List contractors with optional company/role filters."""
        return await self.list(
            skip=skip,
            limit=limit,
            company_id=company_id,
            company_role_id=company_role_id,
        )
