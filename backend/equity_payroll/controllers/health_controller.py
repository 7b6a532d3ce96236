"""
Health controller.
Coordinates health service to return health status.
"""

from equity_payroll.controllers.base_controller import BaseController
from equity_payroll.schemas.health import HealthResponse
from equity_payroll.services.health_service import HealthService


class HealthController(BaseController):
    """Controller for health check operations."""
    
    def __init__(self, health_service: HealthService):
        self.health_service = health_service
    
    async def get_health(self) -> HealthResponse:
        return await self.health_service.get_health()
