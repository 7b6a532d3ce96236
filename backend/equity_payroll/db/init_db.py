"""
Database bootstrapping for local development and tests.
Production schemas are managed by migrations.
"""

from sqlalchemy.ext.asyncio import AsyncEngine

from equity_payroll.db.base import Base
from equity_payroll.core.logging import get_logger
import equity_payroll.models  # noqa: F401  registers all tables on Base.metadata

logger = get_logger(__name__)


async def create_tables(engine: AsyncEngine) -> None:
    """Create all tables known to the ORM metadata."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    
    logger.info("Database tables created", extra={"tables": sorted(Base.metadata.tables)})


async def drop_tables(engine: AsyncEngine) -> None:
    """Drop all tables known to the ORM metadata."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    
    logger.info("Database tables dropped")
