"""User Store: the five parameterized statements against the users table.

Invariants:
    - Every method issues exactly one statement through ConnectionPool.execute
    - Values are always bound parameters (Core constructs), never formatted into SQL
    - Writes use RETURNING so the affected row comes back from the same statement
    - Zero affected rows is reported as None, never as an exception
"""

import logging

from sqlalchemy import delete, insert, select, update

from users_api.infrastructure.database import ConnectionPool
from users_api.models.user import users_table
from users_api.schemas.user import UserWrite

logger = logging.getLogger(__name__)

_COLUMNS = (
    users_table.c.id, users_table.c.name, users_table.c.email, users_table.c.age,
)


def _first(rows: list[dict]) -> dict | None:
    return rows[0] if rows else None


class UserStore:
    """Storage access for the users resource."""

    def __init__(self, pool: ConnectionPool):
        self._pool = pool

    async def list_all(self) -> list[dict]:
        stmt = select(*_COLUMNS).order_by(users_table.c.id.asc())
        return await self._pool.execute(stmt)

    async def get(self, user_id: int) -> dict | None:
        stmt = select(*_COLUMNS).where(users_table.c.id == user_id)
        return _first(await self._pool.execute(stmt))

    async def create(self, user: UserWrite) -> dict:
        stmt = (
            insert(users_table)
            .values(name=user.name, email=user.email, age=user.age)
            .returning(*_COLUMNS)
        )
        row = _first(await self._pool.execute(stmt))
        logger.info("User created", extra={"user_id": row["id"] if row else None})
        return row

    async def update(self, user_id: int, user: UserWrite) -> dict | None:
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(name=user.name, email=user.email, age=user.age)
            .returning(*_COLUMNS)
        )
        return _first(await self._pool.execute(stmt))

    async def delete(self, user_id: int) -> dict | None:
        stmt = (
            delete(users_table)
            .where(users_table.c.id == user_id)
            .returning(*_COLUMNS)
        )
        return _first(await self._pool.execute(stmt))
