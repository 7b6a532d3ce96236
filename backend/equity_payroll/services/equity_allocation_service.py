"""
Equity allocation service.

Each (contractor, year) allocation follows a one-way state machine:
unset -> unlocked -> locked. The first invoice submitted in a year locks the
allocation after the contractor confirms it; locked allocations never change.
"""

import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from equity_payroll.core.config import settings
from equity_payroll.core.exceptions import (
    DataIntegrityError,
    EquityAllocationChanged,
    EquityAllocationLocked,
    NotFoundError,
)
from equity_payroll.db.repositories.contractor_repository import ContractorRepository
from equity_payroll.db.repositories.equity_allocation_repository import EquityAllocationRepository
from equity_payroll.models.company import Company
from equity_payroll.models.equity_allocation import (
    EquityAllocation,
    EquityAllocationLockState,
    EquityAllocationStatus,
)
from equity_payroll.schemas.equity import EquityAllocationResponse
from equity_payroll.schemas.invoice import EquityLockConfirmation
from equity_payroll.services.base_service import BaseService

logger = logging.getLogger(__name__)


def build_lock_confirmation(allocation: EquityAllocation) -> EquityLockConfirmation:
    """Dialog shown before the first invoice of a year locks the allocation."""
    percentage = allocation.equity_percentage
    year = allocation.year
    return EquityLockConfirmation(
        year=year,
        equity_percentage=percentage,
        title=f"Lock {percentage}% in equity for all {year}?",
        body=(
            f"By submitting this invoice, your current equity selection of {percentage}% "
            f"will be locked for all {year}. You won't be able to choose a different "
            f"allocation until the next options grant for {year + 1}."
        ),
        confirm_label=f"Confirm {percentage}% equity selection",
        change_selection_url=settings.EQUITY_SETTINGS_PATH,
    )


def requires_lock_confirmation(allocation: Optional[EquityAllocation]) -> bool:
    """Only an unlocked, non-zero election needs the contractor's confirmation."""
    return (
        allocation is not None
        and allocation.lock_state == EquityAllocationLockState.UNLOCKED
        and allocation.equity_percentage > 0
    )


class EquityAllocationService(BaseService):
    """Service for equity allocation elections and locking."""

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.allocation_repo = EquityAllocationRepository(session)
        self.contractor_repo = ContractorRepository(session)

    async def get_allocation(self, contractor_id: int, year: int) -> Optional[EquityAllocationResponse]:
        """Get a contractor's allocation for a year."""
        await self._require_contractor(contractor_id)
        allocation = await self.allocation_repo.get_for_year(contractor_id, year)
        if not allocation:
            return None
        return EquityAllocationResponse.model_validate(allocation)

    async def list_allocations(self, contractor_id: int) -> List[EquityAllocationResponse]:
        await self._require_contractor(contractor_id)
        allocations = await self.allocation_repo.list_for_contractor(contractor_id)
        return [EquityAllocationResponse.model_validate(a) for a in allocations]

    async def set_equity_percentage(
        self,
        contractor_id: int,
        year: int,
        equity_percentage: int,
    ) -> EquityAllocationResponse:
        """
        Elect the equity percentage for a year.

        Raises:
            EquityAllocationLocked: If the year's allocation is already locked
        """
        await self._require_contractor(contractor_id)
        if not 0 <= equity_percentage <= 100:
            raise DataIntegrityError(
                "Equity percentage out of range",
                {"equity_percentage": equity_percentage},
            )

        allocation = await self.allocation_repo.get_for_year(contractor_id, year)
        if allocation is not None and allocation.locked:
            raise EquityAllocationLocked(year, allocation.equity_percentage)

        if allocation is None:
            allocation = await self.allocation_repo.create(
                company_worker_id=contractor_id,
                year=year,
                equity_percentage=equity_percentage,
                locked=False,
                status=EquityAllocationStatus.PENDING_CONFIRMATION,
            )
        else:
            allocation.equity_percentage = equity_percentage
            allocation.status = EquityAllocationStatus.PENDING_CONFIRMATION
            await self.session.flush()

        await self.session.commit()
        return EquityAllocationResponse.model_validate(allocation)

    async def allocation_for_invoice(
        self,
        company: Company,
        contractor_id: int,
        year: int,
    ) -> Optional[EquityAllocation]:
        """Allocation that applies to an invoice, or None when the company pays cash only."""
        if not company.equity_compensation_enabled:
            return None
        return await self.allocation_repo.get_for_year(contractor_id, year)

    async def lock_allocation(self, allocation: EquityAllocation) -> EquityAllocation:
        """
        Lock an allocation. Idempotent: an already locked allocation is returned as is.

        The write is a compare-and-set on (unlocked, percentage) so a concurrent
        lock of the same row becomes a no-op.
        """
        if allocation.locked:
            return allocation
        if allocation.equity_percentage is None:
            raise DataIntegrityError(
                "Cannot lock an equity allocation without a percentage",
                {"equity_allocation_id": allocation.id},
            )

        locked_now = await self.allocation_repo.lock_if_unlocked(allocation.id, allocation.equity_percentage)
        allocation = await self.allocation_repo.reload(allocation)
        if not allocation.locked:
            raise EquityAllocationChanged(allocation.year)

        if locked_now:
            logger.info(
                "Equity allocation locked",
                extra={
                    "equity_allocation_id": allocation.id,
                    "company_worker_id": allocation.company_worker_id,
                    "year": allocation.year,
                    "equity_percentage": allocation.equity_percentage,
                },
            )
        return allocation

    async def _require_contractor(self, contractor_id: int) -> None:
        if not await self.contractor_repo.get(contractor_id):
            raise NotFoundError("Contractor", contractor_id)
