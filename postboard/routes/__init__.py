"""API routes."""

from fastapi import APIRouter

from postboard.routes import auth, posts
from postboard.schemas import ErrorResponse

api_router = APIRouter()

# Session lifecycle (signup, login, logout)
api_router.include_router(
    auth.router,
    prefix="/v1/auth",
    tags=["auth"],
    responses={code: {"model": ErrorResponse} for code in (400, 401, 409, 503)},
)

# Post queries and mutations
api_router.include_router(
    posts.router,
    prefix="/v1/posts",
    tags=["posts"],
    responses={code: {"model": ErrorResponse} for code in (401, 403, 404, 503)},
)
