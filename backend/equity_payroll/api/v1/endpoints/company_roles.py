"""
Company role API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from equity_payroll.db.session import get_db
from equity_payroll.controllers.company_role_controller import CompanyRoleController
from equity_payroll.schemas.company_role import (
    CompanyRoleCreate,
    CompanyRoleUpdate,
    CompanyRoleResponse,
    CompanyRoleListResponse,
    CompanyRoleRateListResponse,
)

router = APIRouter()


@router.post("", response_model=CompanyRoleResponse, status_code=status.HTTP_201_CREATED)
async def create_company_role(
    role_data: CompanyRoleCreate,
    db: AsyncSession = Depends(get_db),
) -> CompanyRoleResponse:
    """Create a new role with its first rate."""
    controller = CompanyRoleController(db)
    return await controller.create_role(role_data)


@router.get("", response_model=CompanyRoleListResponse)
async def list_company_roles(
    company_id: Optional[int] = Query(None),
    actively_hiring: Optional[bool] = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    db: AsyncSession = Depends(get_db),
) -> CompanyRoleListResponse:
    """List roles; ``actively_hiring=true`` returns only roles that are hiring."""
    controller = CompanyRoleController(db)
    return await controller.list_roles(
        company_id=company_id,
        actively_hiring=actively_hiring,
        skip=skip,
        limit=limit,
    )


@router.get("/actively-hiring", response_model=CompanyRoleListResponse)
async def list_actively_hiring_roles(
    company_id: Optional[int] = Query(None),
    db: AsyncSession = Depends(get_db),
) -> CompanyRoleListResponse:
    """All roles that are actively hiring, unpaginated."""
    controller = CompanyRoleController(db)
    return await controller.list_actively_hiring(company_id)


@router.get("/{role_id}", response_model=CompanyRoleResponse)
async def get_company_role(
    role_id: int,
    db: AsyncSession = Depends(get_db),
) -> CompanyRoleResponse:
    """Get role by ID."""
    controller = CompanyRoleController(db)
    role = await controller.get_role(role_id)
    if not role:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Company role not found",
        )
    return role


@router.get("/{role_id}/rates", response_model=CompanyRoleRateListResponse)
async def list_company_role_rates(
    role_id: int,
    db: AsyncSession = Depends(get_db),
) -> CompanyRoleRateListResponse:
    """Rate history of a role, newest first."""
    controller = CompanyRoleController(db)
    rates = await controller.list_rates(role_id)
    if rates is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Company role not found",
        )
    return rates


@router.put("/{role_id}", response_model=CompanyRoleResponse)
async def update_company_role(
    role_id: int,
    role_data: CompanyRoleUpdate,
    db: AsyncSession = Depends(get_db),
) -> CompanyRoleResponse:
    """Update a role. Rule violations return 422 with the messages."""
    controller = CompanyRoleController(db)
    role = await controller.update_role(role_id, role_data)
    if not role:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Company role not found",
        )
    return role


@router.delete("/{role_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_company_role(
    role_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Soft-delete a role. Fails with 422 while the role has active contractors."""
    controller = CompanyRoleController(db)
    deleted = await controller.delete_role(role_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Company role not found",
        )
