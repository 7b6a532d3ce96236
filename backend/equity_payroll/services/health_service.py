"""
Health service.
Provides health check functionality.
"""

import time
from typing import Callable, Optional

from equity_payroll.core.config import settings
from equity_payroll.db.repositories.health_repository import HealthRepository
from equity_payroll.schemas.health import HealthResponse


class HealthService:
    """Service for health check operations. Opens its own session per check."""
    
    def __init__(self, session_factory: Optional[Callable] = None):
        self.start_time = time.time()
        self._session_factory = session_factory
    
    def _get_session_factory(self) -> Callable:
        if self._session_factory is not None:
            return self._session_factory
        from equity_payroll.db import session as db_session
        if db_session.async_session_maker is None:
            db_session.create_sessionmaker()
        return db_session.async_session_maker
    
    async def get_health(self) -> HealthResponse:
        """
        Get system health status.
        
        Returns:
            HealthResponse with status, uptime, and checks
        """
        uptime_seconds = int(time.time() - self.start_time)
        uptime_str = f"PT{uptime_seconds}S"  # ISO 8601 duration format
        
        checks = {}
        try:
            async with self._get_session_factory()() as session:
                db_ok = await HealthRepository(session).check_database()
                checks["database"] = "ok" if db_ok else "error"
        except Exception as e:
            checks["database"] = f"error: {type(e).__name__}"
        
        status = "ok" if all(check == "ok" for check in checks.values()) else "degraded"
        
        return HealthResponse(
            status=status,
            version=settings.VERSION,
            uptime=uptime_str,
            checks=checks,
        )
