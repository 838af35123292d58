"""Error hierarchy for Postboard operations.

Every error carries a code and an HTTP status; to_response() produces the
standard envelope: { "error": { "code": str, "message": str, "detail": object } }.

Domain errors (4xx) are raised at the point of violation and propagate to the
route layer unchanged. InfrastructureError (503) wraps session cache failures.
"""

from typing import Any


class PostboardError(Exception):
    """Base exception for all Postboard errors."""

    def __init__(
        self,
        message: str,
        code: str,
        http_status: int = 500,
        detail: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status
        self.detail = detail

    def to_response(self) -> dict[str, Any]:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "detail": self.detail,
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(PostboardError):
    """A required identifying field is missing or unusable."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", 400,
            {"field": field} if field else None,
        )
        self.field = field


class ConflictError(PostboardError):
    """Email or phone already registered."""

    def __init__(self, message: str, field: str):
        super().__init__(message, "CONFLICT", 409, {"field": field})
        self.field = field


class AuthenticationError(PostboardError):
    """Unknown user or wrong password.

    Both cases share one message so callers cannot tell which field was wrong.
    """

    def __init__(self):
        super().__init__("Invalid Login", "INVALID_LOGIN", 401)


class AuthenticationRequired(PostboardError):
    """The operation needs an active session and there is none."""

    def __init__(self, message: str = "No user is currently authenticated"):
        super().__init__(message, "AUTHENTICATION_REQUIRED", 401)


class NotFoundError(PostboardError):
    """Referenced resource does not exist."""

    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} not found",
            "NOT_FOUND", 404,
            {"resource": resource_type.lower(), "id": resource_id},
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class AuthorizationError(PostboardError):
    """Session user does not match the resource's owner."""

    def __init__(self):
        super().__init__("Unauthorized", "UNAUTHORIZED", 403)


# ─── Infrastructure Errors (500-level) ──────────────────────────

class InfrastructureError(PostboardError):
    """Session cache unreachable or returned malformed data."""

    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Session cache {operation} failed: {message}",
            "INFRASTRUCTURE_ERROR", 503,
        )
        self.operation = operation
