"""
Invoice repository for database operations.
"""

from typing import Optional, List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func

from equity_payroll.db.repositories.base_repository import BaseRepository
from equity_payroll.models.invoice import Invoice


class InvoiceRepository(BaseRepository[Invoice]):
    """Repository for invoice operations."""
    
    def __init__(self, session: AsyncSession):
        super().__init__(Invoice, session)
    
    async def count_for_contractor(self, company_worker_id: int) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(Invoice).where(Invoice.company_worker_id == company_worker_id)
        )
        return result.scalar_one()
    
    async def list_invoices(
        self,
        company_id: Optional[int] = None,
        company_worker_id: Optional[int] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Invoice]:
        """List invoices newest first."""
        query = select(Invoice)
        if company_id is not None:
            query = query.where(Invoice.company_id == company_id)
        if company_worker_id is not None:
            query = query.where(Invoice.company_worker_id == company_worker_id)
        query = query.order_by(Invoice.id.desc()).offset(skip).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())
