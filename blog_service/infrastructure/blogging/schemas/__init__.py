from blog_service.infrastructure.blogging.schemas.post_schemas import (
    PostCreateRequest,
    PostResponse,
    PostUpdateRequest,
    parse_sort_param,
    to_post_response,
    to_post_responses,
)

__all__ = [
    "PostCreateRequest",
    "PostResponse",
    "PostUpdateRequest",
    "parse_sort_param",
    "to_post_response",
    "to_post_responses",
]
