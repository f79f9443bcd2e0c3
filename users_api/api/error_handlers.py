"""Error Handlers: global exception handlers mapping every failure to the envelope.

Invariants:
    - UsersApiError → envelope with the error's http_status
    - RequestValidationError (malformed body) → 400 envelope
    - Unmatched route or unsupported verb → 404 "Route not found"
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (UsersApiError), request (FastAPI/Starlette), catch-all
    - Client errors logged at WARNING, server errors at ERROR with the original cause
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from users_api.api.responses import error_response
from users_api.core.errors import INTERNAL_ERROR_MESSAGE, UsersApiError

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND_MESSAGE = "Route not found"
INVALID_BODY_MESSAGE = "Invalid JSON body"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_request_error_handlers(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(UsersApiError)
    async def users_api_error_handler(request: Request, exc: UsersApiError):
        """Handle all domain and storage errors."""
        extra = {
            "error_code": exc.code,
            "path": request.url.path,
            "method": request.method,
            "status_code": exc.http_status,
        }
        if exc.http_status >= 500:
            logger.error(
                f"{type(exc).__name__}: {exc.message}",
                extra=extra, exc_info=exc,
            )
        else:
            logger.warning(f"{type(exc).__name__}: {exc.message}", extra=extra)
        return error_response(exc.public_message, exc.http_status)


def _register_request_error_handlers(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Body could not be parsed as JSON."""
        logger.warning(
            f"Invalid request on {request.url.path}: {exc.errors()}",
        )
        return error_response(
            INVALID_BODY_MESSAGE, status.HTTP_400_BAD_REQUEST,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Routing misses (404/405) share one answer; other HTTP errors keep their status."""
        if exc.status_code in (
            status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
        ):
            return error_response(
                ROUTE_NOT_FOUND_MESSAGE, status.HTTP_404_NOT_FOUND,
            )
        return error_response(str(exc.detail), exc.status_code)


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return error_response(
            INTERNAL_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
