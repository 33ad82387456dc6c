"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their attributes
- Entity: Objects with identity and lifecycle
- DomainError and its subclasses: the closed error taxonomy
"""

from .entity import Entity, EntityId
from .exceptions import (
    DomainError,
    InvalidReferenceError,
    NotFoundError,
    ValidationError,
)
from .value_object import ValueObject

__all__ = [
    "DomainError",
    "Entity",
    "EntityId",
    "InvalidReferenceError",
    "NotFoundError",
    "ValidationError",
    "ValueObject",
]
