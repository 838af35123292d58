"""User-facing operations: registration, login/logout and post CRUD.

Each handler receives an explicit RequestContext carrying the session id and
the stores it may touch. Sequences of store calls inside a handler are not
atomic as a whole; only single store operations are.
"""

from dataclasses import dataclass
import logging

from postboard.errors import (
    AuthenticationError,
    AuthenticationRequired,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from postboard.models import (
    HydratedPost,
    Post,
    PublicUser,
    User,
    generate_post_id,
    generate_user_id,
)
from postboard.services.authorization import require_author_authority, require_post_ownership
from postboard.services.credentials import check_password_length, hash_password, verify_password
from postboard.services.sessions import SessionStore
from postboard.stores.records import PostRepository, UserRepository

logger = logging.getLogger("uvicorn.error")


@dataclass
class RequestContext:
    """Everything a handler needs for one request."""

    session_id: str
    sessions: SessionStore
    users: UserRepository
    posts: PostRepository


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a successful register/authenticate."""

    session_id: str
    user: PublicUser


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _present_or_none(value: str | None) -> str | None:
    return None if is_blank(value) else value


def hydrate_author(post: Post, users: UserRepository) -> HydratedPost:
    """Resolve post.author_id to the author's public view."""
    author = users.retrieve_user_by_id(post.author_id)
    return HydratedPost(
        id=post.id,
        author=author.to_public() if author else None,
        content=post.content,
    )


# ============================================================
# Sessions
# ============================================================


async def register(
    ctx: RequestContext, *, name: str, email: str | None, phone: str | None, password: str
) -> AuthResult:
    """Create an account and sign it in on the current session.

    Raises:
        ValidationError: Neither email nor phone given, or password too long.
        ConflictError: Email or phone already registered.
    """
    if is_blank(email) and is_blank(phone):
        raise ValidationError("Either email or phone is required to register", field="email")

    email = _present_or_none(email)
    phone = _present_or_none(phone)

    # Fail fast before paying for the hash; store_user re-checks under its lock.
    if email and ctx.users.retrieve_user_by_email(email) is not None:
        raise ConflictError("Email already registered", field="email")
    if phone and ctx.users.retrieve_user_by_phone(phone) is not None:
        raise ConflictError("Phone number already registered", field="phone")

    check_password_length(password)
    user = User(
        id=generate_user_id(),
        name=name,
        email=email,
        phone=phone,
        password_hash=await hash_password(password),
    )
    ctx.users.store_user(user)
    logger.info("User registered: %s", user.id)

    public_user = user.to_public()
    await ctx.sessions.set_session_user(ctx.session_id, public_user)

    return AuthResult(session_id=ctx.session_id, user=public_user)


async def authenticate(
    ctx: RequestContext, *, email: str | None, phone: str | None, password: str
) -> AuthResult:
    """Sign an existing user in on the current session.

    Email is used when present, otherwise phone.

    Raises:
        ValidationError: Neither email nor phone given.
        AuthenticationError: Unknown user or wrong password (same message).
    """
    if is_blank(email) and is_blank(phone):
        raise ValidationError("Either email or phone is required to login", field="email")

    if not is_blank(email):
        user = ctx.users.retrieve_user_by_email(email)
    else:
        user = ctx.users.retrieve_user_by_phone(phone)

    if user is None or not await verify_password(password, user.password_hash):
        logger.warning("Failed login attempt")
        raise AuthenticationError()

    public_user = user.to_public()
    await ctx.sessions.set_session_user(ctx.session_id, public_user)

    return AuthResult(session_id=ctx.session_id, user=public_user)


async def end_session(ctx: RequestContext) -> bool:
    """Sign out of the current session."""
    await ctx.sessions.clear_session_user(ctx.session_id)
    return True


# ============================================================
# Posts
# ============================================================


async def create_post(ctx: RequestContext, *, author_id: str, content: str) -> HydratedPost:
    """Create a post authored by the session user.

    Raises:
        AuthorizationError: author_id is not the session user.
    """
    session_user = await ctx.sessions.get_session_user(ctx.session_id)
    require_author_authority(session_user, author_id)

    post = Post(id=generate_post_id(), author_id=author_id, content=content)
    ctx.posts.store_post(post)
    logger.info("Post %s created by %s", post.id, author_id)

    return hydrate_author(post, ctx.users)


async def update_post(ctx: RequestContext, *, post_id: str, content: str) -> HydratedPost:
    """Replace the content of a post owned by the session user.

    Raises:
        NotFoundError: No such post (checked first, and again after the update).
        AuthorizationError: Session user is not the author.
    """
    session_user = await ctx.sessions.get_session_user(ctx.session_id)
    require_post_ownership(session_user, post_id, ctx.posts)

    updated = ctx.posts.update_post_content(post_id, content)
    if updated is None:
        # Deleted between the ownership check and the update.
        raise NotFoundError("Post", post_id)
    logger.info("Post %s updated", post_id)

    return hydrate_author(updated, ctx.users)


async def delete_post(ctx: RequestContext, *, post_id: str) -> bool:
    """Permanently delete a post owned by the session user.

    Raises:
        NotFoundError: No such post.
        AuthorizationError: Session user is not the author.
    """
    session_user = await ctx.sessions.get_session_user(ctx.session_id)
    require_post_ownership(session_user, post_id, ctx.posts)

    ctx.posts.delete_post_by_id(post_id)
    logger.info("Post %s deleted", post_id)
    return True


def list_posts_by_user(ctx: RequestContext, user_id: str) -> list[HydratedPost]:
    """All posts by user_id, author-hydrated. No session required."""
    return [hydrate_author(p, ctx.users) for p in ctx.posts.retrieve_posts_by_user_id(user_id)]


async def list_posts_by_current_session(ctx: RequestContext) -> list[HydratedPost]:
    """All posts by the session user.

    Raises:
        AuthenticationRequired: No user on this session.
    """
    session_user = await ctx.sessions.get_session_user(ctx.session_id)
    if session_user is None:
        raise AuthenticationRequired()

    return list_posts_by_user(ctx, session_user.id)
