"""Response Envelope: the one JSON shape every endpoint answers with.

Invariants:
    - success=True bodies never carry `error`; success=False bodies never carry `data`
    - Optional fields that are None are omitted, not sent as null
    - `data` is kept when it is an empty list (an empty collection is still data)

Design Decisions:
    - Two constructors (ok / fail) instead of a free-form dict: the exclusivity
      invariant holds by construction
"""

from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

_UNSET = object()


class Envelope(BaseModel):
    """Uniform response body."""
    success: bool
    data: Any = None
    error: str | None = None
    message: str | None = None
    count: int | None = None
    timestamp: str | None = None

    @classmethod
    def ok(
        cls,
        data: Any = _UNSET,
        *,
        message: str | None = None,
        count: int | None = None,
        timestamp: str | None = None,
    ) -> "Envelope":
        fields = {"message": message, "count": count, "timestamp": timestamp}
        if data is not _UNSET:
            fields["data"] = data
        return cls(success=True, **fields)

    @classmethod
    def fail(cls, error: str, *, message: str | None = None) -> "Envelope":
        return cls(success=False, error=error, message=message)

    def to_content(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)

    def to_response(self, status_code: int = status.HTTP_200_OK) -> JSONResponse:
        return JSONResponse(status_code=status_code, content=self.to_content())


def success_response(
    data: Any = _UNSET,
    *,
    status_code: int = status.HTTP_200_OK,
    message: str | None = None,
    count: int | None = None,
    timestamp: str | None = None,
) -> JSONResponse:
    """Build a success envelope response."""
    return Envelope.ok(
        data, message=message, count=count, timestamp=timestamp,
    ).to_response(status_code)


def error_response(error: str, status_code: int) -> JSONResponse:
    """Build a failure envelope response."""
    return Envelope.fail(error).to_response(status_code)
