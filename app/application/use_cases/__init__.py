"""Application use cases: one class per operation, each with an async execute()."""

from app.application.use_cases.categories import (
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    GetCategoryByIdUseCase,
    ListCategoriesUseCase,
    UpdateCategoryUseCase,
)
from app.application.use_cases.genres import (
    CreateGenreUseCase,
    DeleteGenreUseCase,
    GetGenreByIdUseCase,
    ListGenresUseCase,
    UpdateGenreUseCase,
)

__all__ = [
    "CreateCategoryUseCase",
    "CreateGenreUseCase",
    "DeleteCategoryUseCase",
    "DeleteGenreUseCase",
    "GetCategoryByIdUseCase",
    "GetGenreByIdUseCase",
    "ListCategoriesUseCase",
    "ListGenresUseCase",
    "UpdateCategoryUseCase",
    "UpdateGenreUseCase",
]
