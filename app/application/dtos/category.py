"""DTOs for category use cases (no dependency on ORM or HTTP)."""

from dataclasses import dataclass
from datetime import datetime

from app.domain.entities.category import Category


@dataclass(frozen=True)
class CreateCategoryCommand:
    name: str | None
    description: str | None
    is_active: bool = True


@dataclass(frozen=True)
class UpdateCategoryCommand:
    id: str
    name: str | None
    description: str | None
    is_active: bool = True


@dataclass(frozen=True)
class CreateCategoryOutput:
    id: str

    @classmethod
    def from_aggregate(cls, category: Category) -> "CreateCategoryOutput":
        return cls(id=category.id)


@dataclass(frozen=True)
class UpdateCategoryOutput:
    id: str

    @classmethod
    def from_aggregate(cls, category: Category) -> "UpdateCategoryOutput":
        return cls(id=category.id)


@dataclass(frozen=True)
class CategoryOutput:
    """Category read-model (result of get by id). Carries every field."""

    id: str
    name: str | None
    description: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None

    @classmethod
    def from_aggregate(cls, category: Category) -> "CategoryOutput":
        return cls(
            id=category.id,
            name=category.name,
            description=category.description,
            is_active=category.active,
            created_at=category.created_at,
            updated_at=category.updated_at,
            deleted_at=category.deleted_at,
        )


@dataclass(frozen=True)
class CategoryListOutput:
    """Lighter category read-model for list pages (no updated_at)."""

    id: str
    name: str | None
    description: str | None
    is_active: bool
    created_at: datetime
    deleted_at: datetime | None

    @classmethod
    def from_aggregate(cls, category: Category) -> "CategoryListOutput":
        return cls(
            id=category.id,
            name=category.name,
            description=category.description,
            is_active=category.active,
            created_at=category.created_at,
            deleted_at=category.deleted_at,
        )
