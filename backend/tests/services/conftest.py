"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys on
    - get_db dependency overridden to use test DB sessions
    - db_manager patched so the readiness probe sees the test engine
    - make_company / make_computer seed rows and commit before the test acts

Design Decisions:
    - StaticPool: every session of a test shares the one in-memory connection,
      so rows seeded through test_db are visible to the routes
"""

from datetime import date

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

import computer_db.models  # noqa: F401
from computer_db.db.base import Base
from computer_db.infrastructure.database import (
    DatabaseSessionManager, enable_sqlite_foreign_keys, get_db,
)
from computer_db.models.company import Company as CompanyModel
from computer_db.models.computer import Computer as ComputerModel
from computer_db.repositories.company_repository import SqlCompanyRepository
from computer_db.repositories.computer_repository import SqlComputerRepository
from computer_db.services.company_service import CompanyService
from computer_db.services.computer_service import ComputerService
import computer_db.infrastructure.database as db_module
from computer_db.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
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
def computer_service(test_db):
    return ComputerService(
        test_db, SqlComputerRepository(test_db), SqlCompanyRepository(test_db),
    )


@pytest.fixture
def company_service(test_db):
    return CompanyService(
        test_db, SqlCompanyRepository(test_db), SqlComputerRepository(test_db),
    )


@pytest.fixture
def make_company(test_db):
    async def _make(name: str) -> CompanyModel:
        company = CompanyModel(name=name)
        test_db.add(company)
        await test_db.commit()
        return company
    return _make


@pytest.fixture
def make_computer(test_db):
    async def _make(
        name: str,
        company_id: int | None = None,
        introduced: date | None = None,
        discontinued: date | None = None,
    ) -> ComputerModel:
        computer = ComputerModel(
            name=name, company_id=company_id,
            introduced=introduced, discontinued=discontinued,
        )
        test_db.add(computer)
        await test_db.commit()
        return computer
    return _make


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
