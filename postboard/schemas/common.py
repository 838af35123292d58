"""Common schemas used across the API."""

from typing import Any

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """Structured error detail (see postboard.errors for the codes)."""

    code: str
    message: str
    detail: dict[str, Any] | None = None


class ErrorResponse(BaseModel):
    """Error envelope returned for every failed operation.

    Format: { "error": { "code": str, "message": str, "detail": object } }
    """

    error: ErrorDetail
