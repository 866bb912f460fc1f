"""Service test fixtures - async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - get_auth_provider overridden with FakeAuthProvider (accepts VALID_TOKEN only)
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - db_manager patched: health checks use db_manager.session() directly
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from inkwell.api.dependencies import get_auth_provider
from inkwell.db.base import Base
from inkwell.infrastructure.database import get_db, DatabaseSessionManager
import inkwell.infrastructure.database as db_module
from inkwell.main import app
from inkwell.models.category import Category
from tests.fakes import FakeAuthProvider, VALID_TOKEN


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def auth_provider():
    return FakeAuthProvider()


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {VALID_TOKEN}"}


@pytest.fixture
async def client(test_engine, test_session_factory, auth_provider):
    """FastAPI test client with DB and auth dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_auth_provider] = lambda: auth_provider

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def categories(test_db):
    """Two persisted categories: [Python, Travel]."""
    rows = [Category(name="Python"), Category(name="Travel")]
    test_db.add_all(rows)
    await test_db.commit()
    return rows
