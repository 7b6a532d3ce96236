"""
Contractor service with business logic.
"""

import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from equity_payroll.core.exceptions import NotFoundError, RecordInvalid
from equity_payroll.db.repositories.company_repository import CompanyRepository
from equity_payroll.db.repositories.company_role_repository import CompanyRoleRepository
from equity_payroll.db.repositories.contractor_repository import ContractorRepository
from equity_payroll.schemas.contractor import ContractorCreate, ContractorEnd, ContractorResponse
from equity_payroll.services.base_service import BaseService
from equity_payroll.utils.dates import to_naive_utc, utcnow

logger = logging.getLogger(__name__)


class ContractorService(BaseService):
    """Service for contractor operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.company_repo = CompanyRepository(session)
        self.role_repo = CompanyRoleRepository(session)
        self.contractor_repo = ContractorRepository(session)

    async def create_contractor(self, contractor_data: ContractorCreate) -> ContractorResponse:
        """
        Create a contractor in a role.

        Pay rate type and amount default to the role's current rate.
        """
        company = await self.company_repo.get(contractor_data.company_id)
        if not company:
            raise NotFoundError("Company", contractor_data.company_id)
        role = await self.role_repo.get(contractor_data.company_role_id)
        if not role:
            raise NotFoundError("Company role", contractor_data.company_role_id)
        if role.company_id != company.id:
            raise RecordInvalid("Contractor", ["Company role must belong to the contractor's company"])

        contractor_dict = contractor_data.model_dump()
        if contractor_dict["pay_rate_type"] is None:
            contractor_dict["pay_rate_type"] = role.pay_rate_type
        if contractor_dict["pay_rate_in_subunits"] is None:
            contractor_dict["pay_rate_in_subunits"] = role.pay_rate_in_subunits
        contractor_dict["started_at"] = to_naive_utc(contractor_dict["started_at"]) or utcnow()
        contractor_dict["ended_at"] = to_naive_utc(contractor_dict["ended_at"])

        contractor = await self.contractor_repo.create(**contractor_dict)
        await self.session.commit()
        return ContractorResponse.model_validate(contractor)

    async def get_contractor(self, contractor_id: int) -> Optional[ContractorResponse]:
        """Get contractor by ID."""
        contractor = await self.contractor_repo.get(contractor_id)
        if not contractor:
            return None
        return ContractorResponse.model_validate(contractor)

    async def list_contractors(
        self,
        company_id: Optional[int] = None,
        company_role_id: Optional[int] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> tuple[List[ContractorResponse], int]:
        """List contractors with optional filters."""
        contractors = await self.contractor_repo.list_for_company(
            company_id=company_id,
            company_role_id=company_role_id,
            skip=skip,
            limit=limit,
        )
        return [ContractorResponse.model_validate(c) for c in contractors], len(contractors)

    async def end_contract(self, contractor_id: int, end_data: ContractorEnd) -> Optional[ContractorResponse]:
        """End a contract, now unless an end time is given."""
        contractor = await self.contractor_repo.get(contractor_id)
        if not contractor:
            return None

        ended_at = to_naive_utc(end_data.ended_at) or utcnow()
        if ended_at <= contractor.started_at:
            raise RecordInvalid("Contractor", ["End date must be after start date"])

        contractor.ended_at = ended_at
        await self.session.flush()
        await self.session.commit()

        logger.info(f"Ended contract {contractor_id}", extra={"ended_at": ended_at.isoformat()})
        return ContractorResponse.model_validate(contractor)
