from .author_mapper import AuthorMapper
from .post_mapper import PostMapper

__all__ = [
    "AuthorMapper",
    "PostMapper",
]
