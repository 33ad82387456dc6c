from .author_lookup import AuthorLookupProtocol
from .post_repository import PostRepositoryProtocol

__all__ = [
    "AuthorLookupProtocol",
    "PostRepositoryProtocol",
]
