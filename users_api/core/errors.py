"""Error Hierarchy: typed, categorized exceptions for all Users API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) carry a user-facing message
    - Server errors (500-level) never expose their message: to_response() uses a fixed text
    - Storage errors (DatabaseError family) are raised only by the storage layer and
      translated by route handlers into ConflictError / InternalError

Design Decisions:
    - Single hierarchy with UsersApiError base: one FastAPI handler catches all
    - UniqueViolationError subclasses DatabaseError: an unmatched conflict still
      degrades to a 500, never to a silent success
"""

from enum import Enum

INTERNAL_ERROR_MESSAGE = "Internal server error"


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


class UsersApiError(Exception):
    """Base exception for all Users API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    @property
    def public_message(self) -> str:
        """Message safe to send to the client."""
        if self.http_status >= 500:
            return INTERNAL_ERROR_MESSAGE
        return self.message

    def to_response(self) -> dict:
        """Convert to the failure envelope."""
        return {"success": False, "error": self.public_message}


# ─── Client Errors (400-level) ──────────────────────────────────

class ValidationError(UsersApiError):
    """Request payload is missing fields or holds out-of-range values."""
    def __init__(self, message: str, fields: list[str] | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.fields = fields or []


class NotFoundError(UsersApiError):
    """Requested resource does not exist."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConflictError(UsersApiError):
    """Write collided with an existing row."""
    def __init__(self, message: str):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, 409,
        )


# ─── Server Errors (500-level) ──────────────────────────────────

class InternalError(UsersApiError):
    """Operation failed for a reason the client cannot act on."""
    def __init__(self, message: str):
        super().__init__(
            message, "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, 500,
        )


class DatabaseError(UsersApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation


class UniqueViolationError(DatabaseError):
    """Unique constraint rejected the statement."""
    def __init__(self, message: str, constraint: str | None = None):
        super().__init__(message, "execute")
        self.constraint = constraint
