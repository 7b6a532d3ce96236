"""
Invoice API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from equity_payroll.db.session import get_db
from equity_payroll.controllers.invoice_controller import InvoiceController
from equity_payroll.schemas.invoice import (
    InvoiceCreate,
    InvoiceListResponse,
    InvoicePreviewResponse,
    InvoiceResponse,
)

router = APIRouter()


@router.post("/preview", response_model=InvoicePreviewResponse)
async def preview_invoice(
    invoice_data: InvoiceCreate,
    db: AsyncSession = Depends(get_db),
) -> InvoicePreviewResponse:
    """Totals, equity split and lock confirmation text for a draft invoice."""
    controller = InvoiceController(db)
    return await controller.preview_invoice(invoice_data)


@router.post("", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED)
async def create_invoice(
    invoice_data: InvoiceCreate,
    db: AsyncSession = Depends(get_db),
) -> InvoiceResponse:
    """
    Create an invoice.

    Returns 409 with the confirmation dialog when the year's equity allocation
    must be confirmed; resend with ``confirm_equity_lock`` set.
    """
    controller = InvoiceController(db)
    return await controller.create_invoice(invoice_data)


@router.get("", response_model=InvoiceListResponse)
async def list_invoices(
    company_id: Optional[int] = Query(None),
    company_worker_id: Optional[int] = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    db: AsyncSession = Depends(get_db),
) -> InvoiceListResponse:
    """List invoices, newest first."""
    controller = InvoiceController(db)
    return await controller.list_invoices(
        company_id=company_id,
        company_worker_id=company_worker_id,
        skip=skip,
        limit=limit,
    )


@router.get("/{invoice_id}", response_model=InvoiceResponse)
async def get_invoice(
    invoice_id: int,
    db: AsyncSession = Depends(get_db),
) -> InvoiceResponse:
    """Get invoice by ID."""
    controller = InvoiceController(db)
    invoice = await controller.get_invoice(invoice_id)
    if not invoice:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Invoice not found",
        )
    return invoice
