"""
Contractor API endpoints, including per-year equity allocations and grants.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from equity_payroll.db.session import get_db
from equity_payroll.controllers.contractor_controller import ContractorController
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

router = APIRouter()


@router.post("", response_model=ContractorResponse, status_code=status.HTTP_201_CREATED)
async def create_contractor(
    contractor_data: ContractorCreate,
    db: AsyncSession = Depends(get_db),
) -> ContractorResponse:
    """Create a contractor in a company role."""
    controller = ContractorController(db)
    return await controller.create_contractor(contractor_data)


@router.get("", response_model=ContractorListResponse)
async def list_contractors(
    company_id: Optional[int] = Query(None),
    company_role_id: Optional[int] = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    db: AsyncSession = Depends(get_db),
) -> ContractorListResponse:
    """List contractors with optional filters."""
    controller = ContractorController(db)
    return await controller.list_contractors(
        company_id=company_id,
        company_role_id=company_role_id,
        skip=skip,
        limit=limit,
    )


@router.get("/{contractor_id}", response_model=ContractorResponse)
async def get_contractor(
    contractor_id: int,
    db: AsyncSession = Depends(get_db),
) -> ContractorResponse:
    """Get contractor by ID."""
    controller = ContractorController(db)
    contractor = await controller.get_contractor(contractor_id)
    if not contractor:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Contractor not found",
        )
    return contractor


@router.put("/{contractor_id}/end", response_model=ContractorResponse)
async def end_contract(
    contractor_id: int,
    end_data: ContractorEnd,
    db: AsyncSession = Depends(get_db),
) -> ContractorResponse:
    """End a contractor's contract."""
    controller = ContractorController(db)
    contractor = await controller.end_contract(contractor_id, end_data)
    if not contractor:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Contractor not found",
        )
    return contractor


@router.get("/{contractor_id}/equity-allocations", response_model=EquityAllocationListResponse)
async def list_equity_allocations(
    contractor_id: int,
    db: AsyncSession = Depends(get_db),
) -> EquityAllocationListResponse:
    """All equity allocations of a contractor by year."""
    controller = ContractorController(db)
    return await controller.list_equity_allocations(contractor_id)


@router.get("/{contractor_id}/equity-allocations/{year}", response_model=EquityAllocationResponse)
async def get_equity_allocation(
    contractor_id: int,
    year: int = Path(..., ge=1900, le=9999),
    db: AsyncSession = Depends(get_db),
) -> EquityAllocationResponse:
    """Get the equity allocation for a year."""
    controller = ContractorController(db)
    allocation = await controller.get_equity_allocation(contractor_id, year)
    if not allocation:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Equity allocation not found",
        )
    return allocation


@router.put("/{contractor_id}/equity-allocations/{year}", response_model=EquityAllocationResponse)
async def set_equity_allocation(
    contractor_id: int,
    allocation_data: EquityAllocationUpdate,
    year: int = Path(..., ge=1900, le=9999),
    db: AsyncSession = Depends(get_db),
) -> EquityAllocationResponse:
    """Elect the equity percentage for a year. Returns 409 once the year is locked."""
    controller = ContractorController(db)
    return await controller.set_equity_allocation(contractor_id, year, allocation_data)


@router.post(
    "/{contractor_id}/equity-grants",
    response_model=EquityGrantResponse,
    status_code=status.HTTP_201_CREATED,
)
async def record_equity_grant(
    contractor_id: int,
    grant_data: EquityGrantCreate,
    db: AsyncSession = Depends(get_db),
) -> EquityGrantResponse:
    """Record an equity grant; its share price is used for invoices of that year."""
    controller = ContractorController(db)
    return await controller.record_equity_grant(contractor_id, grant_data)
