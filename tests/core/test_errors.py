"""Tests for the error hierarchy: status codes and client-safe messages."""

from users_api.core.errors import (
    ConflictError, DatabaseError, ErrorCategory, InternalError, NotFoundError,
    UniqueViolationError, ValidationError,
)


def test_client_errors_carry_their_status():
    assert ValidationError("bad").http_status == 400
    assert NotFoundError("User", "7").http_status == 404
    assert ConflictError("taken").http_status == 409


def test_not_found_message_names_resource():
    err = NotFoundError("User", "7")
    assert err.to_response() == {"success": False, "error": "User not found"}
    assert err.resource_id == "7"


def test_server_errors_hide_their_message():
    err = InternalError("connection refused at 10.0.0.3:5432")
    assert err.http_status == 500
    assert err.to_response() == {
        "success": False, "error": "Internal server error",
    }


def test_database_error_keeps_operation_for_logs():
    err = DatabaseError("Database driver error", "query")
    assert err.operation == "query"
    assert "query" in err.message
    assert err.category is ErrorCategory.DATABASE
    assert err.public_message == "Internal server error"


def test_unique_violation_is_a_database_error():
    err = UniqueViolationError("dup", constraint="uq_users_email")
    assert isinstance(err, DatabaseError)
    assert err.constraint == "uq_users_email"
