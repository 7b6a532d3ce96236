"""
Company controller.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from equity_payroll.controllers.base_controller import BaseController
from equity_payroll.services.company_service import CompanyService
from equity_payroll.schemas.company import CompanyCreate, CompanyResponse


class CompanyController(BaseController):
    """Controller for company operations."""
    
    def __init__(self, session: AsyncSession):
        self.company_service = CompanyService(session)
    
    async def create_company(self, company_data: CompanyCreate) -> CompanyResponse:
        return await self.company_service.create_company(company_data)
    
    async def get_company(self, company_id: int) -> Optional[CompanyResponse]:
        return await self.company_service.get_company(company_id)
