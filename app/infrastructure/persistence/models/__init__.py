"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.category import CategoryModel
from app.infrastructure.persistence.models.genre import GenreCategoryModel, GenreModel
from app.infrastructure.persistence.models.mixins import (
    AggregateModel,
    CuidMixin,
    SoftDeleteMixin,
    TimestampMixin,
)

__all__ = [
    "AggregateModel",
    "CategoryModel",
    "CuidMixin",
    "GenreCategoryModel",
    "GenreModel",
    "SoftDeleteMixin",
    "TimestampMixin",
]
