"""Session endpoints.

POST /v1/auth/signup - Register and sign in
POST /v1/auth/login  - Sign in with email or phone
POST /v1/auth/logout - Clear the current session

Routers are thin: call services for business logic.
"""

from fastapi import APIRouter, Depends

from postboard.routes.deps import get_request_context
from postboard.routes.render import render_user
from postboard.schemas import AuthPayload, LoginRequest, SignupRequest, SuccessPayload
from postboard.services import operations
from postboard.services.operations import RequestContext

router = APIRouter()


@router.post("/signup", response_model=AuthPayload, name="signup")
async def signup(
    body: SignupRequest, ctx: RequestContext = Depends(get_request_context)
) -> AuthPayload:
    """Register a user and bind it to the current session.

    Raises:
        400 VALIDATION_ERROR: Neither email nor phone given.
        409 CONFLICT: Email or phone already registered.
    """
    result = await operations.register(
        ctx, name=body.name, email=body.email, phone=body.phone, password=body.password
    )
    return AuthPayload(session_id=result.session_id, user=render_user(result.user, ctx.posts))


@router.post("/login", response_model=AuthPayload, name="login")
async def login(
    body: LoginRequest, ctx: RequestContext = Depends(get_request_context)
) -> AuthPayload:
    """Authenticate and bind the user to the current session.

    Raises:
        400 VALIDATION_ERROR: Neither email nor phone given.
        401 INVALID_LOGIN: Unknown user or wrong password.
    """
    result = await operations.authenticate(
        ctx, email=body.email, phone=body.phone, password=body.password
    )
    return AuthPayload(session_id=result.session_id, user=render_user(result.user, ctx.posts))


@router.post("/logout", response_model=SuccessPayload, name="logout")
async def logout(ctx: RequestContext = Depends(get_request_context)) -> SuccessPayload:
    """Clear the current session."""
    return SuccessPayload(success=await operations.end_session(ctx))
