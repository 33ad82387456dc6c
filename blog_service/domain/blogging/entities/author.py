"""Author reference entity."""

from dataclasses import dataclass

from blog_service.domain.common.entity import Entity
from blog_service.domain.common.value_objects.ids import AuthorId


@dataclass
class Author(Entity[AuthorId]):
    """
    Author as seen from the blogging module.

    Authors are owned by a separate service. The blogging module only
    needs to know that an author with a given id exists.
    """

    id: AuthorId
    name: str | None = None
