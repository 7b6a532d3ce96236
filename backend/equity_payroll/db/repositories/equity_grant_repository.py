"""
Equity grant repository.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from equity_payroll.db.repositories.base_repository import BaseRepository
from equity_payroll.models.equity_grant import EquityGrant


class EquityGrantRepository(BaseRepository[EquityGrant]):
    """Repository for equity grants."""

    def __init__(self, session: AsyncSession):
        super().__init__(EquityGrant, session)

    async def get_latest_for_year(self, company_worker_id: int, period_year: int) -> Optional[EquityGrant]:
        """Most recent grant issued to a contractor for a period year."""
        result = await self.session.execute(
            select(EquityGrant)
            .where(
                EquityGrant.company_worker_id == company_worker_id,
                EquityGrant.period_year == period_year,
            )
            .order_by(EquityGrant.id.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()
