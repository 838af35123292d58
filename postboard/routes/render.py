"""Convert core results to response schemas.

User.posts is resolved here, at response time, from the post repository.
"""

from postboard.models import HydratedPost, PublicUser
from postboard.schemas import PostOut, PostRef, UserOut
from postboard.stores.records import PostRepository


def render_user(user: PublicUser, posts: PostRepository) -> UserOut:
    return UserOut(
        id=user.id,
        name=user.name,
        email=user.email,
        phone=user.phone,
        posts=[
            PostRef(id=p.id, author_id=p.author_id, content=p.content)
            for p in posts.retrieve_posts_by_user_id(user.id)
        ],
    )


def render_post(post: HydratedPost, posts: PostRepository) -> PostOut:
    return PostOut(
        id=post.id,
        author=render_user(post.author, posts) if post.author else None,
        content=post.content,
    )
