"""Errors reported by the HTTP API, with their JSON responses."""

from __future__ import annotations

from datetime import datetime, timezone
from http import HTTPStatus
from typing import Any


class ApiError(Exception):
    """Base class for errors that map to an HTTP response."""

    status = HTTPStatus.INTERNAL_SERVER_ERROR
    error_type = "Internal Server Error"
    prefix = "internal error"

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"{self.prefix}: {detail}")

    def to_response(
        self, now: datetime | None = None
    ) -> tuple[HTTPStatus, dict[str, Any]]:
        """The HTTP status and JSON body describing this error."""
        if now is None:
            now = datetime.now(timezone.utc)
        body = {
            "error": self.error_type,
            "message": str(self),
            "timestamp": now.isoformat(),
        }
        return self.status, body


class BadRequestError(ApiError):
    """The request was malformed or referred to missing input."""

    status = HTTPStatus.BAD_REQUEST
    error_type = "Bad Request"
    prefix = "bad request"


class NotFoundError(ApiError):
    """The requested resource does not exist."""

    status = HTTPStatus.NOT_FOUND
    error_type = "Not Found"
    prefix = "not found"


class ConflictError(ApiError):
    """The request conflicts with the resource's current state."""

    status = HTTPStatus.CONFLICT
    error_type = "Conflict"
    prefix = "conflict"


class InternalError(ApiError):
    """An unexpected failure on the server side."""

    status = HTTPStatus.INTERNAL_SERVER_ERROR
    error_type = "Internal Server Error"
    prefix = "internal error"