"""Generic API response envelope model.

Every client call resolves to this envelope:
{ status: int, data: T | None, error: ApiError | None }

``status`` is the HTTP status code. On 2xx ``data`` holds the parsed body
(``None`` for empty bodies); otherwise ``error`` describes the failure.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, TypeAdapter

T = TypeVar("T")
M = TypeVar("M")

# Status texts Brevo documents for its v3 API
BREVO_HTTP_STATUS: dict[int, str] = {
    200: "OK",
    201: "Created",
    202: "Accepted",
    204: "No Content",
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    429: "Too Many Requests",
    500: "Internal Server Error",
}


def reason_phrase(status: int) -> str:
    """Standard reason text for an HTTP status, or "" when unknown."""
    if status in BREVO_HTTP_STATUS:
        return BREVO_HTTP_STATUS[status]
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return ""


class StatusResult(BaseModel):
    """An HTTP status paired with its reason text."""

    code: int
    message: str

    @classmethod
    def for_code(cls, code: int) -> StatusResult:
        return cls(code=code, message=reason_phrase(code))


class ApiError(BaseModel):
    """Error half of the envelope, built from a non-2xx Brevo response."""

    status: int
    message: str
    code: Any = None  # Brevo sends strings; other JSON values pass through as-is
    details: Any = None  # Raw parsed error body


class ApiResponse(BaseModel, Generic[T]):
    """JSON envelope for all client responses."""

    status: int
    data: T | None = None
    error: ApiError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, status: int, data: Any = None) -> ApiResponse[Any]:
        return cls(status=status, data=data)

    @classmethod
    def failure(cls, status: int, body: Any = None, reason: str | None = None) -> ApiResponse[Any]:
        """Build an error envelope from a raw error body.

        ``message`` prefers the body's own ``message`` field and falls back to
        the HTTP reason phrase; ``code`` and ``details`` pass through the body.
        """
        message = None
        code = None
        if isinstance(body, dict):
            message = body.get("message")
            code = body.get("code")
        if not message:
            message = reason or reason_phrase(status)
        error = ApiError(
            status=status,
            message=str(message),
            code=code,
            details=body,
        )
        return cls(status=status, error=error)

    def data_as(self, model: type[M]) -> M | None:
        """Validate the raw ``data`` payload into ``model``.

        Returns ``None`` when the response carries no data.
        """
        if self.data is None:
            return None
        return TypeAdapter(model).validate_python(self.data)
