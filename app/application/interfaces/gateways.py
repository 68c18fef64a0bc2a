"""Gateway interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
Use cases depend on these only; the SQLAlchemy gateways live in infrastructure.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.entities import Category, Genre
    from app.domain.pagination import Pagination, SearchQuery


class ICategoryGateway(Protocol):
    """Protocol for category persistence (DIP)."""

    async def create(self, category: Category) -> Category:
        """Persist a new category and return the stored state."""

    async def update(self, category: Category) -> Category:
        """Persist changes to an existing category and return the stored state."""

    async def delete_by_id(self, category_id: str) -> None:
        """Delete by id. Deleting an unknown id is a no-op."""

    async def find_by_id(self, category_id: str) -> Category | None:
        """Return the category or None."""

    async def find_all(self, query: SearchQuery) -> Pagination[Category]:
        """Return one page filtered by name/description, sorted and paginated."""

    async def exists_by_ids(self, category_ids: Iterable[str]) -> list[str]:
        """Return the subset of category_ids that exist in storage."""


class IGenreGateway(Protocol):
    """Protocol for genre persistence (DIP)."""

    async def create(self, genre: Genre) -> Genre:
        """Persist a new genre (with its category links)."""

    async def update(self, genre: Genre) -> Genre:
        """Persist changes to a genre, replacing its category links."""

    async def delete_by_id(self, genre_id: str) -> None:
        """Delete by id. Deleting an unknown id is a no-op."""

    async def find_by_id(self, genre_id: str) -> Genre | None:
        """Return the genre or None."""

    async def find_all(self, query: SearchQuery) -> Pagination[Genre]:
        """Return one page filtered by name, sorted and paginated."""
