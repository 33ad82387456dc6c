"""Application service for post operations."""

import structlog

from blog_service.application.blogging.protocols.author_lookup import AuthorLookupProtocol
from blog_service.application.blogging.protocols.post_repository import PostRepositoryProtocol
from blog_service.application.common.pagination import PageRequest, Sort, SortDirection
from blog_service.domain.blogging.entities.author import Author
from blog_service.domain.blogging.entities.post import Post
from blog_service.domain.blogging.exceptions import (
    InvalidAuthorReferenceError,
    PostNotFoundError,
)
from blog_service.domain.common.value_objects.ids import AuthorId, PostId

logger = structlog.get_logger(__name__)


class PostService:
    """
    Application service for blog posts.

    Every mutating operation re-reads the stored post before changing it,
    so callers can only ever change the fields an operation owns: the text
    on update and the deletion flag on delete. Posts are never removed from
    the store here; removing them together with their author is the store's
    job.
    """

    def __init__(
        self,
        author_lookup: AuthorLookupProtocol,
        post_repository: PostRepositoryProtocol,
    ) -> None:
        self.author_lookup = author_lookup
        self.post_repository = post_repository

    def create_post(self, text: str, author_id: int) -> Post:
        """
        Create a new post for an existing author.

        Args:
            text: Post content
            author_id: ID of the author writing the post

        Returns:
            Saved post with its store-assigned id

        Raises:
            InvalidAuthorReferenceError: If the author does not exist
        """
        author = self._resolve_author(author_id)

        post = Post.create(text=text, author_id=author.id)
        post = self.post_repository.save(post)

        logger.info("created_post", post_id=post.id.value, author_id=author_id)
        return post

    def update_post(self, text: str, post_id: int) -> Post:
        """
        Replace the text of a post.

        The author binding and the deletion flag are never touched, and
        soft-deleted posts can still be updated.

        Raises:
            PostNotFoundError: If the post does not exist
        """
        post = self._find_post(post_id)
        post.update_text(text)
        post = self.post_repository.save(post)

        logger.info("updated_post", post_id=post_id)
        return post

    def delete_post(self, post_id: int) -> None:
        """
        Soft delete a post (idempotent operation).

        Raises:
            PostNotFoundError: If the post does not exist
        """
        post = self._find_post(post_id)
        changed = post.soft_delete()
        self.post_repository.save(post)

        if changed:
            logger.info("soft_deleted_post", post_id=post_id)
        else:
            logger.info("post_already_deleted", post_id=post_id)

    def get_post_by_id(self, post_id: int) -> Post:
        """
        Get a post regardless of its deletion state.

        Raises:
            PostNotFoundError: If the post does not exist
        """
        return self._find_post(post_id)

    def list_posts(self) -> list[Post]:
        """Get every post, soft-deleted ones included, in store order."""
        return self.post_repository.find_all()

    def list_posts_by_author(self, author_id: int) -> list[Post]:
        """
        Get all posts written by an author, soft-deleted ones included.

        Raises:
            InvalidAuthorReferenceError: If the author does not exist
        """
        author = self._resolve_author(author_id)
        return self.post_repository.find_by_author(author.id)

    def list_posts_by_author_and_deletion_state(
        self, author_id: int, is_deleted: bool
    ) -> list[Post]:
        """
        Get the posts of an author whose deletion flag equals is_deleted.

        Raises:
            InvalidAuthorReferenceError: If the author does not exist
        """
        author = self._resolve_author(author_id)
        return self.post_repository.find_by_author_and_deletion_state(author.id, is_deleted)

    def list_posts_paginated(
        self,
        page_number: int,
        page_size: int,
        sort_field: str = "id",
        sort_direction: str = "asc",
    ) -> list[Post]:
        """
        Get one page of posts, soft-deleted ones included.

        Args:
            page_number: Zero-based page number
            page_size: Maximum number of posts on the page
            sort_field: Post field to sort by
            sort_direction: 'asc' or 'desc'

        Returns:
            Posts on the requested page (empty past the last page)

        Raises:
            ValidationError: If any paging or sort parameter is invalid
        """
        page_request = PageRequest(
            page_number=page_number,
            page_size=page_size,
            sort=Sort(field=sort_field, direction=SortDirection.parse(sort_direction)),
        )
        return self.post_repository.find_paginated(page_request)

    def _resolve_author(self, author_id: int) -> Author:
        # Ids below 1 are never assigned, so they cannot resolve
        author = self.author_lookup.find_by_id(AuthorId(author_id)) if author_id >= 1 else None
        if author is None:
            logger.warning("invalid_author_reference", author_id=author_id)
            raise InvalidAuthorReferenceError(author_id)
        return author

    def _find_post(self, post_id: int) -> Post:
        post = self.post_repository.find_by_id(PostId(post_id)) if post_id >= 1 else None
        if post is None:
            logger.info("post_not_found", post_id=post_id)
            raise PostNotFoundError(post_id)
        return post
