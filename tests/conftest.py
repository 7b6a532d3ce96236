"""
Pytest configuration and fixtures.
Provides an in-memory SQLite database per test, a session for service tests,
and an HTTP client wired to the same database.
"""

import os

os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest
from dependency_injector import providers
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from equity_payroll.db.init_db import create_tables, drop_tables
from equity_payroll.db.session import get_db
from equity_payroll.deps.di_container import Container, set_container
from equity_payroll.main import app
from equity_payroll.services.health_service import HealthService


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(scope="function")
async def test_engine():
    """Fresh in-memory database with all tables."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_tables(engine)
    
    yield engine
    
    await drop_tables(engine)
    await engine.dispose()


@pytest.fixture(scope="function")
def test_session_maker(test_engine):
    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture(scope="function")
async def test_db_session(test_session_maker):
    """Database session for service-level tests."""
    async with test_session_maker() as session:
        yield session


@pytest.fixture(scope="function")
async def test_client(test_session_maker):
    """
    HTTP client for the app, with request sessions bound to the test database.
    """
    async def override_get_db():
        async with test_session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
    
    container = Container()
    container.health_service.override(
        providers.Singleton(HealthService, session_factory=test_session_maker)
    )
    set_container(container)
    app.dependency_overrides[get_db] = override_get_db
    
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    
    app.dependency_overrides.clear()
    set_container(None)
