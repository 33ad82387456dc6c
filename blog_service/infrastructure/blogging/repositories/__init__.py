from .author_repository import AuthorRepository
from .post_repository import PostRepository

__all__ = [
    "AuthorRepository",
    "PostRepository",
]
