"""Connection Manager: async connection pool with one-statement execution and health checks.

Invariants:
    - execute() runs exactly one statement in its own transaction (commit on success,
      rollback on any exception)
    - Unique-constraint violations are recognised by error code, never by message text
    - All SQLAlchemy exceptions leave this module as DatabaseError / UniqueViolationError
    - health_check() never raises

Design Decisions:
    - ConnectionPool is constructed explicitly in the lifespan and kept on app.state;
      handlers receive it through the get_pool dependency (no module-level singleton)
    - Rows returned as plain dicts: result is fully fetched before the connection
      goes back to the pool
    - pool_pre_ping: stale connections are replaced on checkout
"""

import logging
from collections.abc import Mapping
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import URL
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine
from sqlalchemy.sql import Executable

from users_api.core.errors import DatabaseError, UniqueViolationError

logger = logging.getLogger(__name__)

# SQLSTATE for unique_violation (PostgreSQL, exposed by asyncpg and psycopg)
PG_UNIQUE_VIOLATION = "23505"
# Extended result code name exposed by the sqlite3 module (Python 3.11+)
SQLITE_UNIQUE_VIOLATION = "SQLITE_CONSTRAINT_UNIQUE"


def _driver_attr(exc: IntegrityError, name: str) -> Any:
    """Attribute from the DBAPI error, or from the native error it adapts."""
    for err in (exc.orig, getattr(exc.orig, "__cause__", None)):
        val = getattr(err, name, None)
        if val is not None:
            return val
    return None


def is_unique_violation(exc: IntegrityError) -> bool:
    """True when the driver reports a unique-constraint violation."""
    code = _driver_attr(exc, "sqlstate") or _driver_attr(exc, "pgcode")
    if code == PG_UNIQUE_VIOLATION:
        return True
    return _driver_attr(exc, "sqlite_errorname") == SQLITE_UNIQUE_VIOLATION


class ConnectionPool:
    """Shared pool of database connections for the whole process."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    @classmethod
    def from_url(cls, database_url: str | URL, pool_size: int = 10) -> "ConnectionPool":
        engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
        return cls(engine)

    @asynccontextmanager
    async def connection(self) -> AsyncGenerator[AsyncConnection, None]:
        """Check out a connection inside a transaction; map driver errors."""
        try:
            async with self.engine.begin() as conn:
                yield conn
        except IntegrityError as e:
            if is_unique_violation(e):
                logger.warning(f"DB unique violation: {e.orig}")
                raise UniqueViolationError(
                    "Unique constraint violated",
                    _driver_attr(e, "constraint_name"),
                ) from e
            logger.error(f"DB integrity error: {e}")
            raise DatabaseError("Integrity constraint violated", "execute") from e
        except OperationalError as e:
            logger.error(f"DB operational error: {e}")
            raise DatabaseError("Connection or operational error", "execute") from e
        except DBAPIError as e:
            logger.error(f"DB driver error: {e}")
            raise DatabaseError("Database driver error", "query") from e
        except SQLAlchemyError as e:
            logger.error(f"SQLAlchemy error: {e}")
            raise DatabaseError("Database operation failed", "unknown") from e
        except OSError as e:
            # asyncpg surfaces refused/unreachable hosts as plain socket errors
            logger.error(f"DB connection error: {e}")
            raise DatabaseError("Connection or operational error", "connect") from e

    async def execute(
        self,
        statement: Executable,
        parameters: Mapping[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """Run one parameterized statement and return its rows as dicts."""
        async with self.connection() as conn:
            result = await conn.execute(statement, parameters or {})
            if not result.returns_rows:
                return []
            return [dict(row) for row in result.mappings().all()]

    async def health_check(self) -> bool:
        """Check database connectivity (startup probe and readiness)."""
        try:
            await self.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        """Drain the pool. Safe to call more than once."""
        await self.engine.dispose()
        logger.info("Database pool closed")


def get_pool(request: Request) -> ConnectionPool:
    """FastAPI dependency: the pool built at startup."""
    pool = getattr(request.app.state, "pool", None)
    if pool is None:
        raise RuntimeError("Database not initialized")
    return pool
