"""Protocol for resolving authors owned by the author service."""

from typing import Protocol

from blog_service.domain.blogging.entities.author import Author
from blog_service.domain.common.value_objects.ids import AuthorId


class AuthorLookupProtocol(Protocol):
    """Read-only lookup of authors by id."""

    def find_by_id(self, author_id: AuthorId) -> Author | None: ...
