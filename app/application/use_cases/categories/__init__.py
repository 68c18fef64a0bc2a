"""Category use cases: create, update, get, delete, list."""

from app.application.use_cases.categories.create_category import CreateCategoryUseCase
from app.application.use_cases.categories.delete_category import DeleteCategoryUseCase
from app.application.use_cases.categories.get_category import GetCategoryByIdUseCase
from app.application.use_cases.categories.list_categories import ListCategoriesUseCase
from app.application.use_cases.categories.update_category import UpdateCategoryUseCase

__all__ = [
    "CreateCategoryUseCase",
    "DeleteCategoryUseCase",
    "GetCategoryByIdUseCase",
    "ListCategoriesUseCase",
    "UpdateCategoryUseCase",
]
