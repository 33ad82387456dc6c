"""Common value objects shared across all domain modules."""

from .ids import AuthorId, PostId

__all__ = [
    "AuthorId",
    "PostId",
]
