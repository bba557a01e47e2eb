"""Root conftest — shared test configuration and DB fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the members table
    - get_db dependency overridden to use the test session factory
    - db_manager patched so readiness probes hit the test engine

Design Decisions:
    - SQLite in-memory with StaticPool: one shared connection, so the schema created
      in the fixture is visible to every session
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")

from datetime import date  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from member_api.db.base import Base  # noqa: E402
from member_api.infrastructure.database import (  # noqa: E402
    get_db, DatabaseSessionManager,
)
from member_api.models.member import Member  # noqa: E402
import member_api.infrastructure.database as db_module  # noqa: E402
from member_api.main import app  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
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
def seed_member(test_db):
    """Insert one member version; returns the ORM row."""

    async def _seed(member_id: str, version: int, **fields) -> Member:
        fields.setdefault("first_name", "Ada")
        fields.setdefault("last_name", "Lovelace")
        fields.setdefault("eff_start_date", date(2024, 1, 1))
        fields.setdefault("eff_end_date", date(2099, 12, 31))
        row = Member(member_id=member_id, version=version, **fields)
        test_db.add(row)
        await test_db.commit()
        await test_db.refresh(row)
        return row

    return _seed


@pytest.fixture
def fake_db_manager(test_engine, test_session_factory):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
async def client(test_session_factory, fake_db_manager):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with fake_db_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    db_module.db_manager = fake_db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
