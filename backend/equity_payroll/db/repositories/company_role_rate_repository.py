"""
Repository for company role rate history.
"""

from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from equity_payroll.db.repositories.base_repository import BaseRepository
from equity_payroll.models.company_role_rate import CompanyRoleRate


class CompanyRoleRateRepository(BaseRepository[CompanyRoleRate]):
    """Repository for role rate history."""

    def __init__(self, session: AsyncSession):
        super().__init__(CompanyRoleRate, session)

    async def list_for_role(self, company_role_id: int) -> List[CompanyRoleRate]:
        """All rates of a role, newest first."""
        result = await self.session.execute(
            select(CompanyRoleRate)
            .where(CompanyRoleRate.company_role_id == company_role_id)
            .order_by(CompanyRoleRate.id.desc())
        )
        return list(result.scalars().all())
