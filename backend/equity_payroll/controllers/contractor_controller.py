"""
Contractor controller. Also fronts equity allocations and grants, which are scoped to a contractor.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from equity_payroll.controllers.base_controller import BaseController
from equity_payroll.services.contractor_service import ContractorService
from equity_payroll.services.equity_allocation_service import EquityAllocationService
from equity_payroll.services.equity_grant_service import EquityGrantService
from equity_payroll.schemas.contractor import (
    ContractorCreate,
    ContractorEnd,
    ContractorResponse,
    ContractorListResponse,
)
from equity_payroll.schemas.equity import (
    EquityAllocationListResponse,
    EquityAllocationResponse,
    EquityAllocationUpdate,
    EquityGrantCreate,
    EquityGrantResponse,
)


class ContractorController(BaseController):
    """Controller for contractor operations."""

    def __init__(self, session: AsyncSession):
        self.contractor_service = ContractorService(session)
        self.allocation_service = EquityAllocationService(session)
        self.grant_service = EquityGrantService(session)

    async def create_contractor(self, contractor_data: ContractorCreate) -> ContractorResponse:
        return await self.contractor_service.create_contractor(contractor_data)

    async def get_contractor(self, contractor_id: int) -> Optional[ContractorResponse]:
        return await self.contractor_service.get_contractor(contractor_id)

    async def list_contractors(
        self,
        company_id: Optional[int] = None,
        company_role_id: Optional[int] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> ContractorListResponse:
        contractors, total = await self.contractor_service.list_contractors(
            company_id=company_id,
            company_role_id=company_role_id,
            skip=skip,
            limit=limit,
        )
        return ContractorListResponse(items=contractors, total=total)

    async def end_contract(self, contractor_id: int, end_data: ContractorEnd) -> Optional[ContractorResponse]:
        return await self.contractor_service.end_contract(contractor_id, end_data)

    async def list_equity_allocations(self, contractor_id: int) -> EquityAllocationListResponse:
        allocations = await self.allocation_service.list_allocations(contractor_id)
        return EquityAllocationListResponse(items=allocations, total=len(allocations))

    async def get_equity_allocation(self, contractor_id: int, year: int) -> Optional[EquityAllocationResponse]:
        return await self.allocation_service.get_allocation(contractor_id, year)

    async def set_equity_allocation(
        self,
        contractor_id: int,
        year: int,
        allocation_data: EquityAllocationUpdate,
    ) -> EquityAllocationResponse:
        return await self.allocation_service.set_equity_percentage(
            contractor_id,
            year,
            allocation_data.equity_percentage,
        )

    async def record_equity_grant(self, contractor_id: int, grant_data: EquityGrantCreate) -> EquityGrantResponse:
        return await self.grant_service.record_grant(contractor_id, grant_data)
