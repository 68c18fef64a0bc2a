"""Domain aggregates.

Pure domain models; no ORM or persistence concerns.
"""

from app.domain.entities.category import Category
from app.domain.entities.genre import Genre

__all__ = [
    "Category",
    "Genre",
]
