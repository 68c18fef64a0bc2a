"""Application DTOs (no ORM dependency)."""

from app.application.dtos.category import (
    CategoryListOutput,
    CategoryOutput,
    CreateCategoryCommand,
    CreateCategoryOutput,
    UpdateCategoryCommand,
    UpdateCategoryOutput,
)
from app.application.dtos.genre import (
    CreateGenreCommand,
    CreateGenreOutput,
    GenreListOutput,
    GenreOutput,
    UpdateGenreCommand,
    UpdateGenreOutput,
)

__all__ = [
    "CategoryListOutput",
    "CategoryOutput",
    "CreateCategoryCommand",
    "CreateCategoryOutput",
    "CreateGenreCommand",
    "CreateGenreOutput",
    "GenreListOutput",
    "GenreOutput",
    "UpdateCategoryCommand",
    "UpdateCategoryOutput",
    "UpdateGenreCommand",
    "UpdateGenreOutput",
]
