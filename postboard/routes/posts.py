"""Post endpoints.

Queries:
GET    /v1/posts/by-user/{userId} - Posts by any user (no session needed)
GET    /v1/posts/current-user     - Posts by the session user

Mutations (session user must be the author):
POST   /v1/posts                  - Create
PATCH  /v1/posts/{postId}         - Update content
DELETE /v1/posts/{postId}         - Delete
"""

from fastapi import APIRouter, Depends, Path

from postboard.routes.deps import get_request_context
from postboard.routes.render import render_post
from postboard.schemas import CreatePostRequest, PostOut, SuccessPayload, UpdatePostRequest
from postboard.services import operations
from postboard.services.operations import RequestContext

router = APIRouter()


@router.get("/by-user/{user_id}", response_model=list[PostOut], name="postsByUserId")
async def posts_by_user_id(
    user_id: str = Path(description="Author's user ID", min_length=1),
    ctx: RequestContext = Depends(get_request_context),
) -> list[PostOut]:
    """List a user's posts with authors hydrated."""
    return [render_post(p, ctx.posts) for p in operations.list_posts_by_user(ctx, user_id)]


@router.get("/current-user", response_model=list[PostOut], name="postsByCurrentUser")
async def posts_by_current_user(
    ctx: RequestContext = Depends(get_request_context),
) -> list[PostOut]:
    """List the session user's posts.

    Raises:
        401 AUTHENTICATION_REQUIRED: No active session.
    """
    posts = await operations.list_posts_by_current_session(ctx)
    return [render_post(p, ctx.posts) for p in posts]


@router.post("", response_model=PostOut, name="createPost")
async def create_post(
    body: CreatePostRequest, ctx: RequestContext = Depends(get_request_context)
) -> PostOut:
    """Create a post as the session user.

    Raises:
        403 UNAUTHORIZED: authorId is not the session user.
    """
    post = await operations.create_post(ctx, author_id=body.author_id, content=body.content)
    return render_post(post, ctx.posts)


@router.patch("/{post_id}", response_model=PostOut, name="updatePost")
async def update_post(
    body: UpdatePostRequest,
    post_id: str = Path(description="Post ID", min_length=1),
    ctx: RequestContext = Depends(get_request_context),
) -> PostOut:
    """Replace a post's content.

    Raises:
        404 NOT_FOUND: No such post.
        403 UNAUTHORIZED: Session user is not the author.
    """
    post = await operations.update_post(ctx, post_id=post_id, content=body.content)
    return render_post(post, ctx.posts)


@router.delete("/{post_id}", response_model=SuccessPayload, name="deletePost")
async def delete_post(
    post_id: str = Path(description="Post ID", min_length=1),
    ctx: RequestContext = Depends(get_request_context),
) -> SuccessPayload:
    """Delete a post permanently.

    Raises:
        404 NOT_FOUND: No such post.
        403 UNAUTHORIZED: Session user is not the author.
    """
    return SuccessPayload(success=await operations.delete_post(ctx, post_id=post_id))
