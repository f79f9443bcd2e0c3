"""Health & Readiness Probes: liveness and readiness endpoints.

Invariants:
    - GET /health always returns 200 if the process is up; never touches the database
    - GET /health/ready returns 503 if the database is unreachable

Design Decisions:
    - Separate liveness/readiness: the service keeps serving when the database is
      down, so liveness must not depend on it
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from users_api.api.responses import error_response, success_response
from users_api.infrastructure.database import ConnectionPool, get_pool

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check() -> JSONResponse:
    """Liveness probe."""
    return success_response(
        message="Server is running",
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


@router.get("/ready")
async def readiness_check(
    pool: ConnectionPool = Depends(get_pool),
) -> JSONResponse:
    """Readiness probe: includes database connectivity."""
    if not await pool.health_check():
        return error_response(
            "Database is unavailable", status.HTTP_503_SERVICE_UNAVAILABLE,
        )
    return success_response(message="Database is reachable")
