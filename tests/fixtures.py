"""Shared database fixtures: in-memory SQLite behind a real ConnectionPool.

Invariants:
    - Every test gets a fresh in-memory database with the users table created
    - StaticPool: all checkouts share the single in-memory connection

Design Decisions:
    - SQLite in-memory: fast, no external dependency; RETURNING and named
      constraints behave the same as on PostgreSQL for the statements used here
"""

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from users_api.db.base import Base
from users_api.infrastructure.database import ConnectionPool
import users_api.models.user  # noqa: F401


def make_memory_engine():
    return create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


@pytest.fixture
async def test_engine():
    engine = make_memory_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def pool(test_engine):
    return ConnectionPool(test_engine)
