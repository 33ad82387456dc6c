from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class AuthorId(EntityId):
    """Strongly-typed author identifier."""

    value: int


@dataclass(frozen=True)
class PostId(EntityId):
    """Strongly-typed post identifier."""

    value: int
