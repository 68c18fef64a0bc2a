"""Presenters: application outputs -> API response models. Mapping only."""

from fastapi.responses import JSONResponse

from app.application.dtos.category import CategoryListOutput, CategoryOutput
from app.application.dtos.genre import GenreListOutput, GenreOutput
from app.core.exception_handlers import errors_body
from app.domain.pagination import Pagination
from app.domain.validation import Notification
from app.schemas.category import CategoryListItem, CategoryResponse
from app.schemas.common import PageResponse
from app.schemas.genre import GenreListItem, GenreResponse


def present_category(output: CategoryOutput) -> CategoryResponse:
    return CategoryResponse.model_validate(output)


def present_category_page(
    page: Pagination[CategoryListOutput],
) -> PageResponse[CategoryListItem]:
    return PageResponse[CategoryListItem](
        current_page=page.current_page,
        per_page=page.per_page,
        total=page.total,
        items=[CategoryListItem.model_validate(item) for item in page.items],
    )


def present_genre(output: GenreOutput) -> GenreResponse:
    return GenreResponse(
        id=output.id,
        name=output.name,
        categories_id=list(output.categories),
        is_active=output.is_active,
        created_at=output.created_at,
        updated_at=output.updated_at,
        deleted_at=output.deleted_at,
    )


def present_genre_page(page: Pagination[GenreListOutput]) -> PageResponse[GenreListItem]:
    return PageResponse[GenreListItem](
        current_page=page.current_page,
        per_page=page.per_page,
        total=page.total,
        items=[GenreListItem.model_validate(item) for item in page.items],
    )


def present_notification(notification: Notification) -> JSONResponse:
    """422 with every error of a rejected create/update."""
    return JSONResponse(status_code=422, content=errors_body(notification.errors))
