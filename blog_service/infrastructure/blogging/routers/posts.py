"""API routes for post management."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from blog_service.application.blogging.services.post_service import PostService
from blog_service.config import get_settings
from blog_service.core import container
from blog_service.domain.common.exceptions import DomainError
from blog_service.infrastructure.blogging.schemas import (
    PostCreateRequest,
    PostResponse,
    PostUpdateRequest,
    parse_sort_param,
    to_post_response,
    to_post_responses,
)
from blog_service.infrastructure.common.di import inject_service
from blog_service.infrastructure.common.schemas import ApiResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["posts"])

POSTS_FETCHED = "Posts fetched successfully"


def _unexpected_error(action: str, e: Exception) -> HTTPException:
    logger.error(f"Failed to {action}: {e!s}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
    )


@router.post(
    "",
    response_model=ApiResponse[PostResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_post(
    request: PostCreateRequest,
    service: PostService = Depends(inject_service(container.post_service)),
) -> ApiResponse[PostResponse]:
    """
    Create a post for an existing author.

    Raises:
        InvalidAuthorReferenceError: If the author does not exist (400)
    """
    try:
        post = service.create_post(request.text, request.author_id)
        return ApiResponse[PostResponse](
            success=True,
            message="Post saved successfully",
            response=to_post_response(post),
        )
    except DomainError:
        # Re-raise domain errors - handled by exception handlers
        raise
    except Exception as e:
        raise _unexpected_error(f"create post for author {request.author_id}", e) from e


@router.get(
    "/by-page",
    response_model=ApiResponse[list[PostResponse]],
    status_code=status.HTTP_200_OK,
)
def get_posts_by_page(
    page_number: int | None = Query(None, description="Zero-based page number"),
    page_size: int | None = Query(None, description="Number of posts per page"),
    page_number_alias: int | None = Query(None, alias="pageNumber", include_in_schema=False),
    page_size_alias: int | None = Query(None, alias="pageSize", include_in_schema=False),
    sort: str = Query("id,asc", description="Sort key as 'field,direction'"),
    service: PostService = Depends(inject_service(container.post_service)),
) -> ApiResponse[list[PostResponse]]:
    """
    Get one page of posts, soft-deleted posts included.

    pageNumber and pageSize are accepted for existing clients; the
    snake_case names win when both are sent. The page size falls back to
    the configured default when omitted.
    Invalid paging or sort parameters are rejected with 400.
    """
    if page_number is None:
        page_number = page_number_alias if page_number_alias is not None else 0
    if page_size is None:
        page_size = page_size_alias

    try:
        parsed_sort = parse_sort_param(sort)
        posts = service.list_posts_paginated(
            page_number=page_number,
            page_size=page_size if page_size is not None else get_settings().DEFAULT_PAGE_SIZE,
            sort_field=parsed_sort.field,
            sort_direction=parsed_sort.direction.value,
        )
        return ApiResponse[list[PostResponse]](
            success=True, message=POSTS_FETCHED, response=to_post_responses(posts)
        )
    except DomainError:
        raise
    except Exception as e:
        raise _unexpected_error(f"fetch page {page_number} of posts", e) from e


@router.get(
    "/author-posts/{author_id}",
    response_model=ApiResponse[list[PostResponse]],
    status_code=status.HTTP_200_OK,
)
def get_posts_by_author(
    author_id: int,
    service: PostService = Depends(inject_service(container.post_service)),
) -> ApiResponse[list[PostResponse]]:
    """Get every post of an author, soft-deleted posts included."""
    try:
        posts = service.list_posts_by_author(author_id)
        return ApiResponse[list[PostResponse]](
            success=True, message=POSTS_FETCHED, response=to_post_responses(posts)
        )
    except DomainError:
        raise
    except Exception as e:
        raise _unexpected_error(f"fetch posts of author {author_id}", e) from e


@router.get(
    "/author-deleted-posts/{author_id}",
    response_model=ApiResponse[list[PostResponse]],
    status_code=status.HTTP_200_OK,
)
def get_deleted_posts_by_author(
    author_id: int,
    service: PostService = Depends(inject_service(container.post_service)),
) -> ApiResponse[list[PostResponse]]:
    """Get the soft-deleted posts of an author."""
    try:
        posts = service.list_posts_by_author_and_deletion_state(author_id, is_deleted=True)
        return ApiResponse[list[PostResponse]](
            success=True, message=POSTS_FETCHED, response=to_post_responses(posts)
        )
    except DomainError:
        raise
    except Exception as e:
        raise _unexpected_error(f"fetch deleted posts of author {author_id}", e) from e


@router.get(
    "/author-active-posts/{author_id}",
    response_model=ApiResponse[list[PostResponse]],
    status_code=status.HTTP_200_OK,
)
def get_active_posts_by_author(
    author_id: int,
    service: PostService = Depends(inject_service(container.post_service)),
) -> ApiResponse[list[PostResponse]]:
    """Get the posts of an author that are not deleted."""
    try:
        posts = service.list_posts_by_author_and_deletion_state(author_id, is_deleted=False)
        return ApiResponse[list[PostResponse]](
            success=True, message=POSTS_FETCHED, response=to_post_responses(posts)
        )
    except DomainError:
        raise
    except Exception as e:
        raise _unexpected_error(f"fetch active posts of author {author_id}", e) from e


@router.get(
    "",
    response_model=ApiResponse[list[PostResponse]],
    status_code=status.HTTP_200_OK,
)
def get_posts(
    service: PostService = Depends(inject_service(container.post_service)),
) -> ApiResponse[list[PostResponse]]:
    """Get every post, soft-deleted posts included."""
    try:
        posts = service.list_posts()
        return ApiResponse[list[PostResponse]](
            success=True, message=POSTS_FETCHED, response=to_post_responses(posts)
        )
    except DomainError:
        raise
    except Exception as e:
        raise _unexpected_error("fetch posts", e) from e


@router.get(
    "/{post_id}",
    response_model=ApiResponse[PostResponse],
    status_code=status.HTTP_200_OK,
)
def get_post(
    post_id: int,
    service: PostService = Depends(inject_service(container.post_service)),
) -> ApiResponse[PostResponse]:
    """
    Get a post by id, whether or not it is deleted.

    Raises:
        PostNotFoundError: If the post does not exist (404)
    """
    try:
        post = service.get_post_by_id(post_id)
        return ApiResponse[PostResponse](
            success=True,
            message="Post fetched successfully",
            response=to_post_response(post),
        )
    except DomainError:
        raise
    except Exception as e:
        raise _unexpected_error(f"fetch post {post_id}", e) from e


@router.put(
    "/{post_id}",
    response_model=ApiResponse[PostResponse],
    status_code=status.HTTP_200_OK,
)
def update_post(
    post_id: int,
    request: PostUpdateRequest,
    service: PostService = Depends(inject_service(container.post_service)),
) -> ApiResponse[PostResponse]:
    """
    Update the text of a post.

    Any author_id in the request body is ignored.

    Raises:
        PostNotFoundError: If the post does not exist (404)
    """
    try:
        post = service.update_post(request.text, post_id)
        return ApiResponse[PostResponse](
            success=True,
            message="Post updated successfully",
            response=to_post_response(post),
        )
    except DomainError:
        raise
    except Exception as e:
        raise _unexpected_error(f"update post {post_id}", e) from e


@router.delete(
    "/{post_id}",
    response_model=ApiResponse[None],
    status_code=status.HTTP_200_OK,
)
def delete_post(
    post_id: int,
    service: PostService = Depends(inject_service(container.post_service)),
) -> ApiResponse[None]:
    """
    Soft delete a post.

    Deleting an already-deleted post succeeds.

    Raises:
        PostNotFoundError: If the post does not exist (404)
    """
    try:
        service.delete_post(post_id)
        return ApiResponse[None](success=True, message="Post deleted successfully")
    except DomainError:
        raise
    except Exception as e:
        raise _unexpected_error(f"delete post {post_id}", e) from e
