"""Blogging module domain layer."""

from .entities import Author, Post
from .exceptions import InvalidAuthorReferenceError, PostNotFoundError

__all__ = [
    "Author",
    "InvalidAuthorReferenceError",
    "Post",
    "PostNotFoundError",
]
