"""Users Routes: list, get, create, update, delete over the users table.

Invariants:
    - Write payloads pass validate_user_payload before any database call
    - Each handler issues at most one statement
    - Zero affected rows → NotFoundError; UniqueViolationError → ConflictError;
      any other DatabaseError → InternalError (cause logged, never returned)
    - A path id that cannot be a users.id answers 404 without touching the database

Design Decisions:
    - Raw JSON body (Any) instead of a Pydantic body parameter: validation messages
      and ordering belong to core/validate_user.py, not to FastAPI's 422 format
    - Storage errors matched explicitly here so the conflict message is owned by
      the resource, not by the storage layer
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from users_api.api.responses import success_response
from users_api.core.errors import (
    ConflictError, DatabaseError, InternalError, NotFoundError,
    UniqueViolationError,
)
from users_api.core.validate_user import validate_user_payload
from users_api.infrastructure.database import ConnectionPool, get_pool
from users_api.schemas.user import UserRead
from users_api.services.user_store import UserStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])

RESOURCE = "User"
EMAIL_CONFLICT_MESSAGE = "User with this email already exists"
# users.id is a 32-bit signed integer column
MAX_USER_ID = 2**31 - 1


def get_user_store(pool: ConnectionPool = Depends(get_pool)) -> UserStore:
    return UserStore(pool)


def parse_user_id(raw: str) -> int:
    """Path segment → user id, or NotFoundError if no row could ever match."""
    if not raw.isascii() or not raw.isdigit():
        raise NotFoundError(RESOURCE, raw)
    user_id = int(raw)
    if user_id > MAX_USER_ID:
        raise NotFoundError(RESOURCE, raw)
    return user_id


def _serialize(row: dict) -> dict:
    return UserRead.model_validate(row).model_dump()


def _translate_storage_error(exc: DatabaseError, action: str) -> Exception:
    if isinstance(exc, UniqueViolationError):
        return ConflictError(EMAIL_CONFLICT_MESSAGE)
    return InternalError(f"Error {action}: {exc.message}")


@router.get("")
async def list_users(store: UserStore = Depends(get_user_store)) -> JSONResponse:
    """All users ordered by id."""
    try:
        rows = await store.list_all()
    except DatabaseError as e:
        raise _translate_storage_error(e, "fetching users") from e
    data = [_serialize(r) for r in rows]
    return success_response(data, count=len(data))


@router.get("/{user_id}")
async def get_user(
    user_id: str, store: UserStore = Depends(get_user_store),
) -> JSONResponse:
    uid = parse_user_id(user_id)
    try:
        row = await store.get(uid)
    except DatabaseError as e:
        raise _translate_storage_error(e, "fetching user") from e
    if row is None:
        raise NotFoundError(RESOURCE, user_id)
    return success_response(_serialize(row))


@router.post("")
async def create_user(
    payload: Any = Body(None),
    store: UserStore = Depends(get_user_store),
) -> JSONResponse:
    """Validate, insert, and return the stored row (201)."""
    user = validate_user_payload(payload)
    try:
        row = await store.create(user)
    except DatabaseError as e:
        raise _translate_storage_error(e, "creating user") from e
    return success_response(
        _serialize(row),
        status_code=status.HTTP_201_CREATED,
        message="User created successfully",
    )


@router.put("/{user_id}")
async def update_user(
    user_id: str,
    payload: Any = Body(None),
    store: UserStore = Depends(get_user_store),
) -> JSONResponse:
    """Replace name, email and age of an existing user."""
    user = validate_user_payload(payload)
    uid = parse_user_id(user_id)
    try:
        row = await store.update(uid, user)
    except DatabaseError as e:
        raise _translate_storage_error(e, "updating user") from e
    if row is None:
        raise NotFoundError(RESOURCE, user_id)
    return success_response(
        _serialize(row), message="User updated successfully",
    )


@router.delete("/{user_id}")
async def delete_user(
    user_id: str, store: UserStore = Depends(get_user_store),
) -> JSONResponse:
    uid = parse_user_id(user_id)
    try:
        row = await store.delete(uid)
    except DatabaseError as e:
        raise _translate_storage_error(e, "deleting user") from e
    if row is None:
        raise NotFoundError(RESOURCE, user_id)
    return success_response(
        _serialize(row), message="User deleted successfully",
    )
