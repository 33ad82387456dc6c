"""Read-only repository for Author lookups."""

from sqlalchemy.orm import Session

from blog_service.domain.blogging.entities.author import Author
from blog_service.domain.common.value_objects.ids import AuthorId
from blog_service.infrastructure.blogging.mappers.author_mapper import AuthorMapper
from blog_service.models import Author as AuthorORM


class AuthorRepository:
    """Looks authors up by id in the shared authors table."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = AuthorMapper()

    def find_by_id(self, author_id: AuthorId) -> Author | None:
        orm_model = self.db.get(AuthorORM, author_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None
