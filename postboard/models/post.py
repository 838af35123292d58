"""Post record.

author_id is a back-reference to a User id. It is looked up at response
time (hydration), never stored as a nested user.
"""

from dataclasses import dataclass
from uuid import uuid4

from postboard.models.user import PublicUser


def generate_post_id() -> str:
    """Generate unique post ID."""
    return str(uuid4())


@dataclass(frozen=True)
class Post:
    """Short text post owned by its author."""

    id: str
    author_id: str
    content: str


@dataclass(frozen=True)
class HydratedPost:
    """Post with its author resolved for a response.

    author is None when the referenced user cannot be found.
    """

    id: str
    author: PublicUser | None
    content: str
