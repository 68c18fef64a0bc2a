"""Category API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CategoryCreateRequest(BaseModel):
    """Request body for POST /categories. name may be null; the domain reports it."""

    name: str | None = None
    description: str | None = None
    is_active: bool | None = Field(default=None, description="Null or omitted means true")


class CategoryUpdateRequest(BaseModel):
    """Request body for PUT /categories/{id} (full replacement)."""

    name: str | None = None
    description: str | None = None
    is_active: bool | None = Field(default=None, description="Null or omitted means true")


class CategoryResponse(BaseModel):
    """Category full response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str | None
    description: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None


class CategoryListItem(BaseModel):
    """Category list item (no updated_at)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str | None
    description: str | None
    is_active: bool
    created_at: datetime
    deleted_at: datetime | None
