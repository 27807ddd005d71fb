"""Service test fixtures — async DB, LeaderStore and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Routes receive the test store through app.dependency_overrides
    - The leaders table is cleared after every test (clear_db helper)
    - The client's base URL comes from API_URL

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - StaticPool: every session shares the single in-memory connection
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

import leader_service.models  # noqa: F401
from leader_service.api.dependencies import get_db_manager, get_leader_store
from leader_service.config import get_settings
from leader_service.db.base import Base
from leader_service.infrastructure.database import DatabaseSessionManager
from leader_service.main import app
from leader_service.services.leader_store import LeaderStore
from tests.services.clear_db import clear_db
from tests.services.mock_leader import MockLeader


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def db_manager(test_engine):
    return DatabaseSessionManager.from_engine(test_engine)


@pytest.fixture
def store(db_manager):
    return LeaderStore(db_manager)


@pytest.fixture(autouse=True)
async def cleared_db(store):
    """Run the DB-clearing helper after each test."""
    yield
    await clear_db(store)


@pytest.fixture
def mock_leader(store):
    return MockLeader(store)


@pytest.fixture
async def client(store, db_manager):
    """FastAPI test client with the store dependency overridden."""
    app.dependency_overrides[get_leader_store] = lambda: store
    app.dependency_overrides[get_db_manager] = lambda: db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url=get_settings().api_url,
    ) as c:
        yield c

    app.dependency_overrides.clear()
