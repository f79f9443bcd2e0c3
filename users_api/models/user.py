"""User ORM: the single `users` table.

Invariants:
    - id assigned by the database, never by the service
    - email unique across all rows (uq_users_email)
    - age within [0, 150] (ck_users_age_range), also enforced before submission

Design Decisions:
    - Integer identity key: ids are exposed in URLs as plain integers
    - Table metadata only; the service queries through Core statements on __table__
"""

from sqlalchemy import CheckConstraint, Integer, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from users_api.db.base import Base


class User(Base):
    """User entity."""
    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("email", name="uq_users_email"),
        CheckConstraint("age >= 0 AND age <= 150", name="ck_users_age_range"),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)


users_table = User.__table__
