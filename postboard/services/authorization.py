"""Ownership checks gating post mutations."""

from postboard.errors import AuthorizationError, NotFoundError
from postboard.models import Post, PublicUser
from postboard.stores.records import PostRepository


def require_author_authority(session_user: PublicUser | None, claimed_author_id: str) -> None:
    """Allow only the session user to act as claimed_author_id.

    Raises:
        AuthorizationError: No session user, or a different one.
    """
    if session_user is None or session_user.id != claimed_author_id:
        raise AuthorizationError()


def require_post_ownership(
    session_user: PublicUser | None, post_id: str, posts: PostRepository
) -> Post:
    """Allow only the author of post_id to mutate it.

    Existence is checked before authority, so a missing post is always
    NotFoundError regardless of the session.

    Returns:
        The stored post.

    Raises:
        NotFoundError: No post with post_id.
        AuthorizationError: No session user, or not the author.
    """
    post = posts.retrieve_post_by_id(post_id)
    if post is None:
        raise NotFoundError("Post", post_id)

    if session_user is None or session_user.id != post.author_id:
        raise AuthorizationError()

    return post
