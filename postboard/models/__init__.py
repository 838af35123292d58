"""Domain records.

Records held by the in-memory record store:
- users: registered accounts (with password hash)
- posts: short text posts referencing their author by id
"""

from postboard.models.post import HydratedPost, Post, generate_post_id
from postboard.models.user import PublicUser, User, generate_user_id

__all__ = ["HydratedPost", "Post", "PublicUser", "User", "generate_post_id", "generate_user_id"]
