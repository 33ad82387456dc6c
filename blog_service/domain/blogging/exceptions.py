"""Blogging module domain exceptions."""

from blog_service.domain.common.exceptions import InvalidReferenceError, NotFoundError


class PostNotFoundError(NotFoundError):
    """Raised when a post cannot be found."""

    def __init__(self, post_id: int) -> None:
        super().__init__("Post", post_id, message="Post not found")


class InvalidAuthorReferenceError(InvalidReferenceError):
    """Raised when an author id does not resolve to an existing author."""

    def __init__(self, author_id: int) -> None:
        super().__init__("Author", author_id, message="Invalid author id")
