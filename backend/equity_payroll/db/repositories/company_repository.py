"""
Company repository for database operations.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from equity_payroll.db.repositories.base_repository import BaseRepository
from equity_payroll.models.company import Company


class CompanyRepository(BaseRepository[Company]):
    """Repository for company operations."""
    
    def __init__(self, session: AsyncSession):
        super().__init__(Company, session)
