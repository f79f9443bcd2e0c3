"""User Schemas: Pydantic models at the API boundary.

Invariants:
    - UserWrite fields are strict: "30" is not an age, True is not an age
    - UserRead mirrors the users table row, nothing more

Design Decisions:
    - Presence and range checks live in core/validate_user.py, not here: they
      carry their own client-facing messages and must run before type checks
"""

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr


class UserWrite(BaseModel):
    """Body of create and update: all three mutable fields."""
    model_config = ConfigDict(extra="ignore")

    name: StrictStr
    email: StrictStr
    age: StrictInt


class UserRead(BaseModel):
    """Public-facing user row."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    age: int
