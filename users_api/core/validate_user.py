"""User Payload Validation: pure checks run before any database access.

Invariants:
    - Pure: no IO, no DB, same input gives the same result
    - Presence is checked first, then types, then the age range
    - Applies identically to create and update

Design Decisions:
    - A missing field is absent, null, or a blank string; age 0 is a valid age
      (the range is inclusive), so numeric falsiness is never "missing"
"""

from pydantic import ValidationError as PydanticValidationError

from users_api.core.errors import ValidationError
from users_api.schemas.user import UserWrite

REQUIRED_FIELDS = ("name", "email", "age")
AGE_MIN = 0
AGE_MAX = 150

MISSING_FIELDS_MESSAGE = "Name, email, and age are required"
WRONG_TYPES_MESSAGE = "Name and email must be strings and age must be an integer"
AGE_RANGE_MESSAGE = f"Age must be between {AGE_MIN} and {AGE_MAX}"


def _is_missing(value: object) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def find_missing_fields(payload: object) -> list[str]:
    """Required fields absent from payload, in declaration order."""
    if not isinstance(payload, dict):
        return list(REQUIRED_FIELDS)
    return [f for f in REQUIRED_FIELDS if _is_missing(payload.get(f))]


def validate_user_payload(payload: object) -> UserWrite:
    """Check a create/update body. Raises ValidationError on the first failed rule."""
    missing = find_missing_fields(payload)
    if missing:
        raise ValidationError(MISSING_FIELDS_MESSAGE, fields=missing)

    try:
        user = UserWrite.model_validate(payload)
    except PydanticValidationError as e:
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
        raise ValidationError(WRONG_TYPES_MESSAGE, fields=fields) from e

    if not AGE_MIN <= user.age <= AGE_MAX:
        raise ValidationError(AGE_RANGE_MESSAGE, fields=["age"])
    return user
