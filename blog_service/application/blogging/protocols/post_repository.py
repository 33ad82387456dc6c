"""Protocol for Post repository operations."""

from typing import Protocol

from blog_service.application.common.pagination import PageRequest
from blog_service.domain.blogging.entities.post import Post
from blog_service.domain.common.value_objects.ids import AuthorId, PostId


class PostRepositoryProtocol(Protocol):
    """Protocol defining the interface for Post repository operations."""

    def save(self, post: Post) -> Post:
        """Insert a new post (assigning its id) or update text and deletion flag."""
        ...

    def find_by_id(self, post_id: PostId) -> Post | None: ...

    def find_all(self) -> list[Post]: ...

    def find_by_author(self, author_id: AuthorId) -> list[Post]: ...

    def find_by_author_and_deletion_state(
        self, author_id: AuthorId, is_deleted: bool
    ) -> list[Post]: ...

    def find_paginated(self, page_request: PageRequest) -> list[Post]: ...
