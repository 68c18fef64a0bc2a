"""DTOs for genre use cases (no dependency on ORM or HTTP)."""

from dataclasses import dataclass, field
from datetime import datetime

from app.domain.entities.genre import Genre


@dataclass(frozen=True)
class CreateGenreCommand:
    name: str | None
    is_active: bool = True
    categories: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class UpdateGenreCommand:
    id: str
    name: str | None
    is_active: bool = True
    categories: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class CreateGenreOutput:
    id: str

    @classmethod
    def from_aggregate(cls, genre: Genre) -> "CreateGenreOutput":
        return cls(id=genre.id)


@dataclass(frozen=True)
class UpdateGenreOutput:
    id: str

    @classmethod
    def from_aggregate(cls, genre: Genre) -> "UpdateGenreOutput":
        return cls(id=genre.id)


@dataclass(frozen=True)
class GenreOutput:
    """Genre read-model (result of get by id), including category IDs."""

    id: str
    name: str | None
    is_active: bool
    categories: list[str]
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None

    @classmethod
    def from_aggregate(cls, genre: Genre) -> "GenreOutput":
        return cls(
            id=genre.id,
            name=genre.name,
            is_active=genre.active,
            categories=list(genre.categories),
            created_at=genre.created_at,
            updated_at=genre.updated_at,
            deleted_at=genre.deleted_at,
        )


@dataclass(frozen=True)
class GenreListOutput:
    id: str
    name: str | None
    is_active: bool
    created_at: datetime
    deleted_at: datetime | None

    @classmethod
    def from_aggregate(cls, genre: Genre) -> "GenreListOutput":
        return cls(
            id=genre.id,
            name=genre.name,
            is_active=genre.active,
            created_at=genre.created_at,
            deleted_at=genre.deleted_at,
        )
