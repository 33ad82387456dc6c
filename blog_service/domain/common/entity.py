"""
Base class for Entities.

Entities have a distinct identity that runs through time and different
states. Two entities are equal if they have the same identity, regardless of
their attributes.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from .exceptions import ValidationError
from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    A value of 0 is the placeholder for an entity that has not been
    persisted yet; the store assigns the real id on first save.

    Example:
        post_id = PostId(42)
        author_id = AuthorId(42)
        # Different types, so they cannot be mixed up
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValidationError(
                f"{self.__class__.__name__} must be non-negative", value=self.value
            )

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Set placeholder id. The store assigns the real one."""
        return cls(0)

    def is_persisted(self) -> bool:
        return self.value != 0

    def to_primitive(self) -> int:
        return self.value


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Subclasses must have an 'id' attribute of type IdType.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
