"""
Domain layer exceptions.

These exceptions represent domain-level errors raised when business rules
are violated or referenced entities cannot be resolved. They are never
caught inside the domain or application layers; the infrastructure layer
translates them into transport responses.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions inherit from this class
    so they can be caught and handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when domain validation fails.

    Example: negative page number, unknown sort field.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class NotFoundError(DomainError):
    """
    Raised when an entity addressed directly by its id cannot be found.

    Example: updating a post that does not exist.
    """

    def __init__(self, entity_type: str, entity_id: object, message: str | None = None) -> None:
        msg = message or f"{entity_type} with id {entity_id} not found"
        super().__init__(msg, {"entity_type": entity_type, "entity_id": entity_id})
        self.entity_type = entity_type
        self.entity_id = entity_id


class InvalidReferenceError(DomainError):
    """
    Raised when a reference to another aggregate does not resolve.

    Example: creating a post for an author id that no author has.
    """

    def __init__(self, entity_type: str, entity_id: object, message: str | None = None) -> None:
        msg = message or f"Invalid {entity_type} reference: {entity_id}"
        super().__init__(msg, {"entity_type": entity_type, "entity_id": entity_id})
        self.entity_type = entity_type
        self.entity_id = entity_id
