"""FastAPI dependencies wiring requests to the core.

The record repositories are process-wide singletons. The session id is an
opaque token kept in the signed session cookie; it is issued on first contact
and never derived from user data.
"""

import secrets

from fastapi import Depends, Request

from postboard.services.operations import RequestContext
from postboard.services.sessions import SessionStore, create_session_store
from postboard.settings import get_settings
from postboard.stores.records import (
    InMemoryPostRepository,
    InMemoryUserRepository,
    PostRepository,
    UserRepository,
)

SESSION_ID_KEY = "sessionId"

_users = InMemoryUserRepository()
_posts = InMemoryPostRepository()


def get_user_repository() -> UserRepository:
    return _users


def get_post_repository() -> PostRepository:
    return _posts


def get_session_store() -> SessionStore:
    return create_session_store(get_settings().session_ttl_seconds)


def get_session_id(request: Request) -> str:
    """Read the opaque session id, issuing one if the cookie has none."""
    session_id = request.session.get(SESSION_ID_KEY)
    if not session_id:
        session_id = secrets.token_urlsafe(24)
        request.session[SESSION_ID_KEY] = session_id
    return session_id


def get_request_context(
    session_id: str = Depends(get_session_id),
    sessions: SessionStore = Depends(get_session_store),
    users: UserRepository = Depends(get_user_repository),
    posts: PostRepository = Depends(get_post_repository),
) -> RequestContext:
    """Bundle the session handle and stores for one request."""
    return RequestContext(session_id=session_id, sessions=sessions, users=users, posts=posts)
