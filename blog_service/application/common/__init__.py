"""
Application common module.

Contains the paging parameters shared by list queries.
"""

from .pagination import MAX_PAGE_SIZE, PageRequest, Sort, SortDirection

__all__ = [
    "MAX_PAGE_SIZE",
    "PageRequest",
    "Sort",
    "SortDirection",
]
