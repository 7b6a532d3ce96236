"""
Company service.
"""

from typing import Optional

from equity_payroll.db.repositories.company_repository import CompanyRepository
from equity_payroll.schemas.company import CompanyCreate, CompanyResponse
from equity_payroll.services.base_service import BaseService


class CompanyService(BaseService):
    """Service for company operations."""

    def __init__(self, session):
        super().__init__(session)
        self.company_repo = CompanyRepository(session)

    async def create_company(self, company_data: CompanyCreate) -> CompanyResponse:
        """Create a new company."""
        company = await self.company_repo.create(**company_data.model_dump())
        await self.session.commit()
        return CompanyResponse.model_validate(company)

    async def get_company(self, company_id: int) -> Optional[CompanyResponse]:
        """Get company by ID."""
        company = await self.company_repo.get(company_id)
        if not company:
            return None
        return CompanyResponse.model_validate(company)
