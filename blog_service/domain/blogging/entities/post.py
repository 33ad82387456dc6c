"""
Post entity.

Encapsulates the business rules for blog posts.
"""

from dataclasses import dataclass

from blog_service.domain.common.entity import Entity
from blog_service.domain.common.value_objects.ids import AuthorId, PostId


@dataclass
class Post(Entity[PostId]):
    """
    A blog post written by an author.

    Business Rules:
    - The author is bound once, at creation, and never changes
    - Deletion is logical: the is_deleted flag is set and never reset
    - Deleting an already-deleted post is a no-op
    """

    id: PostId
    text: str
    author_id: AuthorId
    is_deleted: bool = False

    # Command methods

    def update_text(self, text: str) -> None:
        """
        Replace the content of this post.

        Only the text changes; the author binding and deletion state
        are left as they are, including for soft-deleted posts.
        """
        self.text = text

    def soft_delete(self) -> bool:
        """
        Mark this post as deleted.

        Returns:
            True if the flag changed, False if the post was already deleted
        """
        if self.is_deleted:
            return False
        self.is_deleted = True
        return True

    # Factory methods

    @classmethod
    def create(cls, text: str, author_id: AuthorId) -> "Post":
        """
        Create a new, not yet persisted post.

        Args:
            text: Post content
            author_id: ID of the owning author

        Returns:
            New Post instance with a placeholder id
        """
        return cls(
            id=PostId.generate(),
            text=text,
            author_id=author_id,
            is_deleted=False,
        )

    @classmethod
    def create_with_id(
        cls,
        id: PostId,
        text: str,
        author_id: AuthorId,
        is_deleted: bool,
    ) -> "Post":
        """Reconstitute a post from persistence."""
        return cls(
            id=id,
            text=text,
            author_id=author_id,
            is_deleted=is_deleted,
        )
