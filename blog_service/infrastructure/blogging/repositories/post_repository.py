"""Repository for Post domain entities."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from blog_service.application.common.pagination import PageRequest
from blog_service.domain.blogging.entities.post import Post
from blog_service.domain.blogging.exceptions import PostNotFoundError
from blog_service.domain.common.value_objects.ids import AuthorId, PostId
from blog_service.infrastructure.blogging.mappers.post_mapper import PostMapper
from blog_service.models import Post as PostORM

# Sortable domain field → ORM column
_SORT_COLUMNS = {
    "id": PostORM.id,
    "text": PostORM.text,
    "author_id": PostORM.author_id,
    "is_deleted": PostORM.is_deleted,
}


class PostRepository:
    """Repository for Post domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = PostMapper()

    def save(self, post: Post) -> Post:
        """
        Save a post entity.

        Args:
            post: The post entity to save

        Returns:
            Saved post entity with database-generated values
        """
        if post.id.is_persisted():
            orm_model = self.db.get(PostORM, post.id.value)
            if orm_model is None:
                raise PostNotFoundError(post.id.value)
            self.mapper.to_orm(post, orm_model)
        else:
            orm_model = self.mapper.to_orm(post)
            self.db.add(orm_model)

        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def find_by_id(self, post_id: PostId) -> Post | None:
        orm_model = self.db.get(PostORM, post_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_all(self) -> list[Post]:
        """Get every post, in insertion (id) order."""
        stmt = select(PostORM).order_by(PostORM.id)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_author(self, author_id: AuthorId) -> list[Post]:
        stmt = select(PostORM).where(PostORM.author_id == author_id.value).order_by(PostORM.id)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_author_and_deletion_state(
        self, author_id: AuthorId, is_deleted: bool
    ) -> list[Post]:
        stmt = (
            select(PostORM)
            .where(
                PostORM.author_id == author_id.value,
                PostORM.is_deleted == is_deleted,
            )
            .order_by(PostORM.id)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_paginated(self, page_request: PageRequest) -> list[Post]:
        """
        Get one page of posts.

        Args:
            page_request: Page number, page size and sort key

        Returns:
            Posts on the requested page, ordered by the sort key then by id
        """
        column = _SORT_COLUMNS[page_request.sort.field]
        order = column.asc() if page_request.sort.ascending else column.desc()

        stmt = select(PostORM).order_by(order)
        if page_request.sort.field != "id":
            stmt = stmt.order_by(PostORM.id)
        stmt = stmt.offset(page_request.offset).limit(page_request.limit)

        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]
