"""
API v1 router that aggregates all endpoint routers.
"""

from fastapi import APIRouter

from equity_payroll.api.v1.endpoints import (
    health,
    companies,
    company_roles,
    contractors,
    invoices,
)

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(companies.router, prefix="/companies", tags=["companies"])
api_router.include_router(company_roles.router, prefix="/company-roles", tags=["company-roles"])
api_router.include_router(contractors.router, prefix="/contractors", tags=["contractors"])
api_router.include_router(invoices.router, prefix="/invoices", tags=["invoices"])
