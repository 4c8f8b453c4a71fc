"""Service test fixtures — async DB, seeded teams/projects, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys ON
      (cascading deletes behave as on PostgreSQL)
    - get_db dependency overridden to use test DB sessions
    - db_manager patched so readiness probes hit the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - Identities are plain strings: the identity provider is exercised through
      the X-User-ID header in route tests only
"""

import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from workbench.core.domain_types import IdentityId, Role, Scope
from workbench.db.base import Base
from workbench.infrastructure.database import get_db, DatabaseSessionManager
from workbench.services.membership_store import MembershipStore
from workbench.services.project_service import ProjectService
from workbench.services.team_service import TeamService
import workbench.infrastructure.database as db_module
import workbench.models  # noqa: F401
from workbench.main import app

OWNER = IdentityId("user-owner")
OUTSIDER = IdentityId("user-outsider")


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

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
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

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
def add_member(test_db):
    """Insert a membership directly (membership management has no public operation)."""
    async def _add(identity: str, scope: Scope, role: Role):
        membership = await MembershipStore(test_db).create_membership(
            IdentityId(identity), scope, role,
        )
        await test_db.commit()
        return membership
    return _add


@pytest.fixture
async def seed_team(test_db):
    """Team created by OWNER."""
    return await TeamService(test_db).create_team(
        OWNER, {"name": "Core Team", "description": "platform"},
    )


@pytest.fixture
async def seed_project(test_db, seed_team):
    """PRIVATE project under seed_team, created by OWNER."""
    return await ProjectService(test_db).create_project(OWNER, {
        "name": "Billing",
        "description": "Invoices and payments",
        "team_id": seed_team.id,
        "visibility": "PRIVATE",
    })
