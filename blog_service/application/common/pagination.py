"""
Pagination types for queries.

Provides zero-based page requests with a single sort key.

Example:
    page_request = PageRequest(
        page_number=0,
        page_size=3,
        sort=Sort.parse("id,asc"),
    )
    posts = post_repository.find_paginated(page_request)
"""

from dataclasses import dataclass, field
from enum import Enum

from blog_service.domain.common.exceptions import ValidationError

# Maximum allowed page size
MAX_PAGE_SIZE = 100

# Post fields that can be used as a sort key
SORTABLE_FIELDS = frozenset({"id", "text", "author_id", "is_deleted"})


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: str) -> "SortDirection":
        """Parse a direction, case-insensitively."""
        try:
            return cls(value.strip().lower())
        except ValueError as e:
            raise ValidationError(
                "Sort direction must be 'asc' or 'desc'", field="sort", value=value
            ) from e


@dataclass(frozen=True)
class Sort:
    """
    Sort key for list queries.

    Attributes:
        field: Name of a sortable post field
        direction: Ascending or descending
    """

    field: str = "id"
    direction: SortDirection = SortDirection.ASC

    def __post_init__(self) -> None:
        if self.field not in SORTABLE_FIELDS:
            raise ValidationError(
                f"Cannot sort by '{self.field}'. Sortable fields: "
                f"{', '.join(sorted(SORTABLE_FIELDS))}",
                field="sort",
                value=self.field,
            )

    @classmethod
    def parse(cls, value: str) -> "Sort":
        """
        Parse the 'field,direction' form, e.g. "id,desc".

        The direction defaults to ascending when omitted.
        """
        parts = [part.strip() for part in value.split(",")]
        if len(parts) > 2 or not parts[0]:
            raise ValidationError(
                "Sort must have the form 'field,direction'", field="sort", value=value
            )
        direction = SortDirection.parse(parts[1]) if len(parts) == 2 else SortDirection.ASC
        return cls(field=parts[0], direction=direction)

    @property
    def ascending(self) -> bool:
        return self.direction is SortDirection.ASC


@dataclass(frozen=True)
class PageRequest:
    """
    Pagination parameters for list queries.

    Attributes:
        page_number: Requested page (0-indexed)
        page_size: Number of items per page
        sort: Sort key applied before slicing
    """

    page_number: int = 0
    page_size: int = 10
    sort: Sort = field(default_factory=Sort)

    def __post_init__(self) -> None:
        if self.page_number < 0:
            raise ValidationError(
                "Page number cannot be negative", field="page_number", value=self.page_number
            )
        if self.page_size < 1:
            raise ValidationError(
                "Page size must be at least 1", field="page_size", value=self.page_size
            )
        if self.page_size > MAX_PAGE_SIZE:
            raise ValidationError(
                f"Page size cannot exceed {MAX_PAGE_SIZE}",
                field="page_size",
                value=self.page_size,
            )

    @property
    def offset(self) -> int:
        """Calculate the offset for database queries."""
        return self.page_number * self.page_size

    @property
    def limit(self) -> int:
        """Return the limit for database queries."""
        return self.page_size
