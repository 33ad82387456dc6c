"""Mapper for Author ORM → Domain conversion."""

from blog_service.domain.blogging.entities.author import Author
from blog_service.domain.common.value_objects.ids import AuthorId
from blog_service.models import Author as AuthorORM


class AuthorMapper:
    """Authors are read-only here, so only the ORM → domain direction exists."""

    def to_domain(self, orm_model: AuthorORM) -> Author:
        return Author(id=AuthorId(orm_model.id), name=orm_model.name)
