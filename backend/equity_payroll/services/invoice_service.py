"""
Invoice service - preview and create invoices with their cash/equity split.
"""

import logging
from typing import List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from equity_payroll.core.exceptions import EquityLockConfirmationRequired, NotFoundError
from equity_payroll.db.repositories.company_repository import CompanyRepository
from equity_payroll.db.repositories.contractor_repository import ContractorRepository
from equity_payroll.db.repositories.invoice_repository import InvoiceRepository
from equity_payroll.models.company import Company
from equity_payroll.models.contractor import Contractor
from equity_payroll.models.equity_allocation import EquityAllocationLockState
from equity_payroll.models.invoice import Invoice, InvoiceStatus
from equity_payroll.schemas.invoice import (
    InvoiceCreate,
    InvoicePreviewResponse,
    InvoiceResponse,
)
from equity_payroll.services.base_service import BaseService
from equity_payroll.services.equity_allocation_service import (
    EquityAllocationService,
    build_lock_confirmation,
    requires_lock_confirmation,
)
from equity_payroll.services.invoice_equity_calculator import (
    InvoiceEquityCalculator,
    invoice_total_in_cents,
)

logger = logging.getLogger(__name__)


def invoice_status_label(invoice: Invoice, required_approvals: int) -> str:
    """Human readable status, e.g. ``Awaiting approval (0/2)``."""
    if invoice.status == InvoiceStatus.RECEIVED:
        return f"Awaiting approval ({invoice.invoice_approvals_count}/{required_approvals})"
    return invoice.status.value.capitalize()


class InvoiceService(BaseService):
    """Service for invoice operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.company_repo = CompanyRepository(session)
        self.contractor_repo = ContractorRepository(session)
        self.invoice_repo = InvoiceRepository(session)
        self.allocation_service = EquityAllocationService(session)
        self.calculator = InvoiceEquityCalculator(session)

    async def preview_invoice(self, invoice_data: InvoiceCreate) -> InvoicePreviewResponse:
        """Compute the totals shown before an invoice is sent. Nothing is persisted."""
        contractor, company = await self._load_contractor(invoice_data.company_worker_id)
        year = invoice_data.invoice_date.year

        total = invoice_total_in_cents(contractor, invoice_data.total_minutes, invoice_data.amount_in_usd)
        split = await self.calculator.calculate(company, contractor, year, total)
        allocation = await self.allocation_service.allocation_for_invoice(company, contractor.id, year)

        confirmation = None
        if requires_lock_confirmation(allocation):
            confirmation = build_lock_confirmation(allocation)

        return InvoicePreviewResponse(
            **split.model_dump(),
            total_minutes=invoice_data.total_minutes if contractor.is_hourly else None,
            requires_equity_lock_confirmation=confirmation is not None,
            equity_lock_confirmation=confirmation,
        )

    async def create_invoice(self, invoice_data: InvoiceCreate) -> InvoiceResponse:
        """
        Create an invoice.

        The first invoice of a year locks the contractor's equity allocation for
        that year. A non-zero unlocked allocation must be confirmed by sending
        ``confirm_equity_lock``; later invoices reuse the locked percentage.

        Raises:
            EquityLockConfirmationRequired: If the allocation needs confirming first
        """
        contractor, company = await self._load_contractor(invoice_data.company_worker_id)
        year = invoice_data.invoice_date.year

        total = invoice_total_in_cents(contractor, invoice_data.total_minutes, invoice_data.amount_in_usd)

        allocation = await self.allocation_service.allocation_for_invoice(company, contractor.id, year)
        if allocation is not None and allocation.lock_state == EquityAllocationLockState.UNLOCKED:
            if requires_lock_confirmation(allocation) and not invoice_data.confirm_equity_lock:
                raise EquityLockConfirmationRequired(build_lock_confirmation(allocation).model_dump())
            await self.allocation_service.lock_allocation(allocation)

        split = await self.calculator.calculate(company, contractor, year, total)
        invoice_number = await self.invoice_repo.count_for_contractor(contractor.id) + 1

        invoice = await self.invoice_repo.create(
            company_id=company.id,
            company_worker_id=contractor.id,
            invoice_number=str(invoice_number),
            invoice_date=invoice_data.invoice_date,
            description=invoice_data.description,
            notes=invoice_data.notes,
            total_minutes=invoice_data.total_minutes if contractor.is_hourly else None,
            total_amount_in_usd_cents=split.total_amount_in_usd_cents,
            cash_amount_in_cents=split.cash_amount_in_cents,
            equity_amount_in_cents=split.equity_amount_in_cents,
            equity_amount_in_options=split.equity_amount_in_options or 0,
            equity_percentage=split.equity_percentage,
            status=InvoiceStatus.RECEIVED,
            invoice_approvals_count=0,
        )
        await self.session.commit()

        logger.info(
            f"Created invoice {invoice.id}",
            extra={
                "company_worker_id": contractor.id,
                "total_amount_in_usd_cents": invoice.total_amount_in_usd_cents,
                "equity_percentage": invoice.equity_percentage,
            },
        )
        return self._build_response(invoice, company)

    async def get_invoice(self, invoice_id: int) -> Optional[InvoiceResponse]:
        """Get invoice by ID."""
        invoice = await self.invoice_repo.get(invoice_id)
        if not invoice:
            return None
        company = await self.company_repo.get(invoice.company_id)
        return self._build_response(invoice, company)

    async def list_invoices(
        self,
        company_id: Optional[int] = None,
        company_worker_id: Optional[int] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> Tuple[List[InvoiceResponse], int]:
        """List invoices, newest first."""
        invoices = await self.invoice_repo.list_invoices(
            company_id=company_id,
            company_worker_id=company_worker_id,
            skip=skip,
            limit=limit,
        )
        companies = {}
        responses = []
        for invoice in invoices:
            if invoice.company_id not in companies:
                companies[invoice.company_id] = await self.company_repo.get(invoice.company_id)
            responses.append(self._build_response(invoice, companies[invoice.company_id]))
        return responses, len(responses)

    async def _load_contractor(self, contractor_id: int) -> Tuple[Contractor, Company]:
        contractor = await self.contractor_repo.get(contractor_id)
        if not contractor:
            raise NotFoundError("Contractor", contractor_id)
        company = await self.company_repo.get(contractor.company_id)
        if not company:
            raise NotFoundError("Company", contractor.company_id)
        return contractor, company

    def _build_response(self, invoice: Invoice, company: Company) -> InvoiceResponse:
        required = company.required_invoice_approval_count
        payload = {
            "id": invoice.id,
            "company_id": invoice.company_id,
            "company_worker_id": invoice.company_worker_id,
            "invoice_number": invoice.invoice_number,
            "invoice_date": invoice.invoice_date,
            "description": invoice.description,
            "notes": invoice.notes,
            "total_minutes": invoice.total_minutes,
            "total_amount_in_usd_cents": invoice.total_amount_in_usd_cents,
            "cash_amount_in_cents": invoice.cash_amount_in_cents,
            "equity_amount_in_cents": invoice.equity_amount_in_cents,
            "equity_amount_in_options": invoice.equity_amount_in_options,
            "equity_percentage": invoice.equity_percentage,
            "status": invoice.status,
            "invoice_approvals_count": invoice.invoice_approvals_count,
            "required_approvals_count": required,
            "status_label": invoice_status_label(invoice, required),
        }
        return InvoiceResponse.model_validate(payload)
