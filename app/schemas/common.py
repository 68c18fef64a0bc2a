"""Shared API schemas: list envelope, id body and error bodies."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

ItemT = TypeVar("ItemT")


class IdResponse(BaseModel):
    """Body of create/update responses."""

    id: str


class ErrorMessage(BaseModel):
    message: str


class ErrorListResponse(BaseModel):
    """422 body for validation failures (returned Notification or DomainException)."""

    errors: list[ErrorMessage]


class MessageResponse(BaseModel):
    """404 / 500 / 503 body."""

    message: str


class PageResponse(BaseModel, Generic[ItemT]):
    """Pagination envelope of every list endpoint (current_page is 0-based)."""

    current_page: int = Field(..., ge=0)
    per_page: int = Field(..., ge=1)
    total: int = Field(..., ge=0)
    items: list[ItemT]
