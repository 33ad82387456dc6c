"""Pydantic schemas for Post API request/response validation."""

from collections.abc import Iterable

from pydantic import BaseModel, Field

from blog_service.application.common.pagination import Sort
from blog_service.domain.blogging.entities.post import Post

# camelCase sort keys accepted for compatibility with existing API clients
_SORT_FIELD_ALIASES = {
    "postId": "id",
    "authorId": "author_id",
    "isDeleted": "is_deleted",
}


class PostCreateRequest(BaseModel):
    """Schema for creating a Post."""

    text: str = Field(..., min_length=1, description="Post content")
    author_id: int = Field(..., ge=1, description="ID of the author writing the post")


class PostUpdateRequest(BaseModel):
    """
    Schema for updating a Post.

    author_id is accepted so clients can send the full post shape, but it is
    ignored: a post's author never changes.
    """

    text: str = Field(..., min_length=1, description="New post content")
    author_id: int | None = Field(None, description="Ignored on update")


class PostResponse(BaseModel):
    """Schema for Post response data."""

    post_id: int
    text: str
    author_id: int
    is_deleted: bool


def to_post_response(post: Post) -> PostResponse:
    """Build the response shape for a post, field by field."""
    return PostResponse(
        post_id=post.id.value,
        text=post.text,
        author_id=post.author_id.value,
        is_deleted=post.is_deleted,
    )


def to_post_responses(posts: Iterable[Post]) -> list[PostResponse]:
    return [to_post_response(post) for post in posts]


def parse_sort_param(value: str) -> Sort:
    """Parse a 'field,direction' sort query parameter, accepting camelCase fields."""
    field, _, direction = value.partition(",")
    field = _SORT_FIELD_ALIASES.get(field.strip(), field.strip())
    return Sort.parse(f"{field},{direction}" if direction else field)
