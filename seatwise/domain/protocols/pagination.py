"""Cursor pagination types shared by repository ports.

Listings are ordered by id (UUIDv7, so creation order) and paged with a
strict ``id > after`` cursor. Repositories fetch ``first + 1`` rows to learn
whether another page exists without a second query.
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar
from uuid import UUID

T = TypeVar("T")


@dataclass(frozen=True, slots=True, kw_only=True)
class PageRequest:
    """Page window requested by a caller.

    Attributes:
        first: Maximum number of items to return.
        after: Return only items with id strictly greater than this.
    """

    first: int = 20
    after: UUID | None = None

    def __post_init__(self) -> None:
        if self.first <= 0:
            raise ValueError("first must be positive")


@dataclass(frozen=True, slots=True, kw_only=True)
class CursorPage(Generic[T]):
    """One page of a cursor-paginated listing.

    Attributes:
        items: Items on this page, ordered by id.
        has_next_page: True if more items follow the last one.
        total_count: Number of items matching the filter across all pages.
    """

    items: list[T] = field(default_factory=list)
    has_next_page: bool = False
    total_count: int = 0
