"""Schemas for posts and their authors."""

from pydantic import BaseModel, Field


class PostRef(BaseModel):
    """A post listed under its author (author not expanded)."""

    id: str
    author_id: str = Field(alias="authorId")
    content: str

    model_config = {"populate_by_name": True}


class UserOut(BaseModel):
    """Public user; posts are resolved at response time."""

    id: str
    name: str
    email: str | None = None
    phone: str | None = None
    posts: list[PostRef] = Field(default_factory=list)


class PostOut(BaseModel):
    """A post with its author hydrated."""

    id: str
    author: UserOut | None = None
    content: str


class CreatePostRequest(BaseModel):
    """Request body for createPost."""

    author_id: str = Field(alias="authorId", min_length=1)
    content: str

    model_config = {"populate_by_name": True}


class UpdatePostRequest(BaseModel):
    """Request body for updatePost."""

    content: str
