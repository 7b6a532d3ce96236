"""
Equity grant service.
"""

from decimal import Decimal
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from equity_payroll.core.exceptions import NotFoundError
from equity_payroll.db.repositories.contractor_repository import ContractorRepository
from equity_payroll.db.repositories.equity_grant_repository import EquityGrantRepository
from equity_payroll.models.company import Company
from equity_payroll.schemas.equity import EquityGrantCreate, EquityGrantResponse
from equity_payroll.services.base_service import BaseService


class EquityGrantService(BaseService):
    """Service for equity grants and per-year share prices."""

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.grant_repo = EquityGrantRepository(session)
        self.contractor_repo = ContractorRepository(session)

    async def record_grant(self, contractor_id: int, grant_data: EquityGrantCreate) -> EquityGrantResponse:
        """Record a grant issued to a contractor."""
        contractor = await self.contractor_repo.get(contractor_id)
        if not contractor:
            raise NotFoundError("Contractor", contractor_id)

        grant = await self.grant_repo.create(
            company_worker_id=contractor_id,
            **grant_data.model_dump(),
        )
        await self.session.commit()
        return EquityGrantResponse.model_validate(grant)

    async def share_price_for_year(
        self,
        company: Company,
        contractor_id: int,
        year: int,
    ) -> Optional[Decimal]:
        """Share price of the contractor's grant for ``year``, else the company's fair market value."""
        grant = await self.grant_repo.get_latest_for_year(contractor_id, year)
        if grant is not None:
            return Decimal(grant.share_price_usd)
        if company.fmv_per_share_in_usd is not None:
            return Decimal(company.fmv_per_share_in_usd)
        return None
