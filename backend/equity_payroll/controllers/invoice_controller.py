"""
Invoice controller.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from equity_payroll.controllers.base_controller import BaseController
from equity_payroll.services.invoice_service import InvoiceService
from equity_payroll.schemas.invoice import (
    InvoiceCreate,
    InvoiceListResponse,
    InvoicePreviewResponse,
    InvoiceResponse,
)


class InvoiceController(BaseController):
    """Controller for invoice operations."""

    def __init__(self, session: AsyncSession):
        self.invoice_service = InvoiceService(session)

    async def preview_invoice(self, invoice_data: InvoiceCreate) -> InvoicePreviewResponse:
        """Compute an invoice's totals without saving it."""
        return await self.invoice_service.preview_invoice(invoice_data)

    async def create_invoice(self, invoice_data: InvoiceCreate) -> InvoiceResponse:
        """Create an invoice."""
        return await self.invoice_service.create_invoice(invoice_data)

    async def get_invoice(self, invoice_id: int) -> Optional[InvoiceResponse]:
        return await self.invoice_service.get_invoice(invoice_id)

    async def list_invoices(
        self,
        company_id: Optional[int] = None,
        company_worker_id: Optional[int] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> InvoiceListResponse:
        invoices, total = await self.invoice_service.list_invoices(
            company_id=company_id,
            company_worker_id=company_worker_id,
            skip=skip,
            limit=limit,
        )
        return InvoiceListResponse(items=invoices, total=total)
