"""Genre API schemas. Category references travel as categories_id."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class GenreCreateRequest(BaseModel):
    """Request body for POST /genres."""

    name: str | None = None
    is_active: bool | None = Field(default=None, description="Null or omitted means true")
    categories_id: list[str] | None = Field(default=None, description="Category IDs")


class GenreUpdateRequest(BaseModel):
    """Request body for PUT /genres/{id}; categories_id replaces the current list."""

    name: str | None = None
    is_active: bool | None = Field(default=None, description="Null or omitted means true")
    categories_id: list[str] | None = Field(default=None, description="Category IDs")


class GenreResponse(BaseModel):
    """Genre full response."""

    id: str
    name: str | None
    categories_id: list[str]
    is_active: bool
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None


class GenreListItem(BaseModel):
    """Genre list item."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str | None
    is_active: bool
    created_at: datetime
    deleted_at: datetime | None
