"""
Equity allocation repository.
"""

from typing import Optional, List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update

from equity_payroll.db.repositories.base_repository import BaseRepository
from equity_payroll.models.equity_allocation import EquityAllocation, EquityAllocationStatus


class EquityAllocationRepository(BaseRepository[EquityAllocation]):
    """Repository for equity allocations."""

    def __init__(self, session: AsyncSession):
        super().__init__(EquityAllocation, session)

    async def get_for_year(self, company_worker_id: int, year: int) -> Optional[EquityAllocation]:
        """Get a contractor's allocation for a calendar year."""
        result = await self.session.execute(
            select(EquityAllocation).where(
                EquityAllocation.company_worker_id == company_worker_id,
                EquityAllocation.year == year,
            )
        )
        return result.scalar_one_or_none()

    async def list_for_contractor(self, company_worker_id: int) -> List[EquityAllocation]:
        result = await self.session.execute(
            select(EquityAllocation)
            .where(EquityAllocation.company_worker_id == company_worker_id)
            .order_by(EquityAllocation.year)
        )
        return list(result.scalars().all())

    async def lock_if_unlocked(self, allocation_id: int, equity_percentage: int) -> bool:
        """
        Compare-and-set the lock flag.

        Only an unlocked row still holding ``equity_percentage`` is locked.

        Returns:
            True if this call performed the transition
        """
        result = await self.session.execute(
            update(EquityAllocation)
            .where(
                EquityAllocation.id == allocation_id,
                EquityAllocation.locked == False,  # noqa: E712
                EquityAllocation.equity_percentage == equity_percentage,
            )
            .values(locked=True, status=EquityAllocationStatus.APPROVED)
            .execution_options(synchronize_session=False)
        )
        await self.session.flush()
        return result.rowcount == 1

    async def reload(self, allocation: EquityAllocation) -> EquityAllocation:
        """Re-read an allocation's columns from the database."""
        await self.session.refresh(allocation)
        return allocation
