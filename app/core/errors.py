from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from starlette.responses import JSONResponse

from schemas.content_generation import ErrorBody, ErrorEnvelope


class ErrorCode(str, Enum):
    method_not_allowed = "METHOD_NOT_ALLOWED"
    auth_error = "AUTH_ERROR"
    validation_error = "VALIDATION_ERROR"
    internal_error = "INTERNAL_ERROR"


def utc_timestamp() -> str:
    """UTC ISO-8601 time with millisecond precision and a ``Z`` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class APIError(RuntimeError):
    """Raised by the HTTP layer to short-circuit a request with an error envelope."""

    def __init__(
        self,
        status_code: int,
        code: ErrorCode,
        message: str,
        details: str | None = None,
        timestamp: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details
        self.timestamp = timestamp

    @classmethod
    def method_not_allowed(cls) -> APIError:
        return cls(405, ErrorCode.method_not_allowed, "Only POST method allowed")

    @classmethod
    def auth(cls) -> APIError:
        return cls(401, ErrorCode.auth_error, "Invalid API key")

    @classmethod
    def validation(cls) -> APIError:
        return cls(
            400,
            ErrorCode.validation_error,
            "Missing required fields: prompt, region, ophthalmology_keywords",
        )

    @classmethod
    def internal(cls, details: str | None) -> APIError:
        return cls(
            500,
            ErrorCode.internal_error,
            "Content generation failed",
            details=details,
            timestamp=utc_timestamp(),
        )

    def to_envelope(self) -> ErrorEnvelope:
        return ErrorEnvelope(
            error=ErrorBody(
                code=self.code.value,
                message=self.message,
                details=self.details,
                timestamp=self.timestamp,
            )
        )

    def to_response(self) -> JSONResponse:
        return JSONResponse(
            status_code=self.status_code,
            content=self.to_envelope().model_dump(exclude_none=True),
        )
