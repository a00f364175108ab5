"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory database session, parcel factories
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import pytest

from tracker.boundary.db.models.parcel_model import ParcelStatus
from tracker.models.parcel import Parcel


@pytest.fixture
async def test_engine():
    """
    Create in-memory SQLite async engine with all tables.

    Yields:
        AsyncEngine: Engine sharing one connection across sessions
    """
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.pool import StaticPool
    from tracker.boundary.db.base import Base
    import tracker.boundary.db.models  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def test_async_db(test_engine):
    """
    Provide a session on the in-memory database.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

    async_session = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest.fixture
def make_parcel():
    """
    Build unsaved Parcel records.

    Returns:
        Callable: factory accepting field overrides
    """

    def _make(**overrides) -> Parcel:
        fields = {
            "client": 1000,
            "status": ParcelStatus.REGISTERED,
            "address": "12 Test Street, Testville",
            "created_at": "2024-01-01T00:00:00Z",
        }
        fields.update(overrides)
        return Parcel(**fields)

    return _make
