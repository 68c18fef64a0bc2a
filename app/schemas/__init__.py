"""Pydantic request/response schemas for the API."""

from app.schemas.category import (
    CategoryCreateRequest,
    CategoryListItem,
    CategoryResponse,
    CategoryUpdateRequest,
)
from app.schemas.common import (
    ErrorListResponse,
    ErrorMessage,
    IdResponse,
    MessageResponse,
    PageResponse,
)
from app.schemas.genre import (
    GenreCreateRequest,
    GenreListItem,
    GenreResponse,
    GenreUpdateRequest,
)
from app.schemas.health import HealthResponse

__all__ = [
    "CategoryCreateRequest",
    "CategoryListItem",
    "CategoryResponse",
    "CategoryUpdateRequest",
    "ErrorListResponse",
    "ErrorMessage",
    "GenreCreateRequest",
    "GenreListItem",
    "GenreResponse",
    "GenreUpdateRequest",
    "HealthResponse",
    "IdResponse",
    "MessageResponse",
    "PageResponse",
]
