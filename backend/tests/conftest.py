"""
Test Configuration — Fixtures for the page workspace, test client and seed DB.

Every test gets a fresh workspace built from the demo fixtures, with the
simulated delays set to zero.
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from api.deps import get_workspace
from api.main import app
from core.config import Settings
from dashboard.workspace import Workspace
from db.session import Base

# In-memory SQLite; StaticPool keeps one connection so the schema survives.
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def test_settings():
    return Settings(
        insights_refresh_delay_seconds=0.0,
        report_generation_delay_seconds=0.0,
    )


@pytest.fixture
def workspace(test_settings):
    """Fresh page state for one test."""
    return Workspace.from_fixtures(test_settings)


@pytest.fixture
async def client(workspace):
    """Create an async test client bound to the test workspace."""
    app.dependency_overrides[get_workspace] = lambda: workspace

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def test_engine():
    """Create a test database engine with all tables."""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def test_db(test_engine):
    session_factory = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session
