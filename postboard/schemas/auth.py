"""Schemas for signup/login/logout."""

from pydantic import BaseModel, Field

from postboard.schemas.posts import UserOut


class SignupRequest(BaseModel):
    """Request body for signup. Either email or phone must be non-blank."""

    name: str
    email: str = ""
    phone: str = ""
    password: str


class LoginRequest(BaseModel):
    """Request body for login. Email is used when both are given."""

    email: str = ""
    phone: str = ""
    password: str


class AuthPayload(BaseModel):
    """Session id plus the signed-in user."""

    session_id: str = Field(alias="sessionId")
    user: UserOut

    model_config = {"populate_by_name": True}


class SuccessPayload(BaseModel):
    """Plain success flag."""

    success: bool
