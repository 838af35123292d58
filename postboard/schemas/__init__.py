"""Pydantic schemas for API request/response validation."""

from postboard.schemas.auth import AuthPayload, LoginRequest, SignupRequest, SuccessPayload
from postboard.schemas.common import ErrorDetail, ErrorResponse
from postboard.schemas.posts import (
    CreatePostRequest,
    PostOut,
    PostRef,
    UpdatePostRequest,
    UserOut,
)

__all__ = [
    "AuthPayload",
    "CreatePostRequest",
    "ErrorDetail",
    "ErrorResponse",
    "LoginRequest",
    "PostOut",
    "PostRef",
    "SignupRequest",
    "SuccessPayload",
    "UpdatePostRequest",
    "UserOut",
]
