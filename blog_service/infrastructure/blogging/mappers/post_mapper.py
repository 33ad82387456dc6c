"""Mapper for Post ORM ↔ Domain conversion."""

from blog_service.domain.blogging.entities.post import Post
from blog_service.domain.common.value_objects.ids import AuthorId, PostId
from blog_service.models import Post as PostORM


class PostMapper:
    """Mapper for Post ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: PostORM) -> Post:
        """Convert ORM model to domain entity."""
        return Post.create_with_id(
            id=PostId(orm_model.id),
            text=orm_model.text,
            author_id=AuthorId(orm_model.author_id),
            is_deleted=orm_model.is_deleted,
        )

    def to_orm(self, domain_entity: Post, orm_model: PostORM | None = None) -> PostORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing. The author binding is never rewritten.
            orm_model.text = domain_entity.text
            orm_model.is_deleted = domain_entity.is_deleted
            return orm_model

        # Create new
        return PostORM(
            id=domain_entity.id.value if domain_entity.id.is_persisted() else None,
            text=domain_entity.text,
            author_id=domain_entity.author_id.value,
            is_deleted=domain_entity.is_deleted,
        )
