"""Search query and pagination envelope shared by every list operation."""

from collections.abc import Callable
from dataclasses import dataclass, field

SORT_ASC = "asc"
SORT_DESC = "desc"


@dataclass(frozen=True)
class SearchQuery:
    """Input of every list use case. page is 0-based; terms filters when non-blank."""

    page: int = 0
    per_page: int = 10
    terms: str = ""
    sort: str = "name"
    direction: str = SORT_ASC


@dataclass(frozen=True)
class Pagination[T]:
    """One page of items plus the total count of matching records."""

    current_page: int
    per_page: int
    total: int
    items: list[T] = field(default_factory=list)

    def map[R](self, mapper: Callable[[T], R]) -> "Pagination[R]":
        """Return the same envelope with each item passed through mapper."""
        return Pagination(
            current_page=self.current_page,
            per_page=self.per_page,
            total=self.total,
            items=[mapper(item) for item in self.items],
        )
