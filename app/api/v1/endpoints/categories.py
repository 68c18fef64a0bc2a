"""Category API: thin routes delegating to category use cases."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from app.api.v1.dependencies import (
    get_create_category_use_case,
    get_delete_category_use_case,
    get_get_category_use_case,
    get_list_categories_use_case,
    get_search_query,
    get_update_category_use_case,
)
from app.api.v1.presenters import (
    present_category,
    present_category_page,
    present_notification,
)
from app.application.dtos.category import CreateCategoryCommand, UpdateCategoryCommand
from app.application.use_cases.categories import (
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    GetCategoryByIdUseCase,
    ListCategoriesUseCase,
    UpdateCategoryUseCase,
)
from app.core.limiter import limit_writes
from app.domain.pagination import SearchQuery
from app.domain.validation import Notification
from app.schemas.category import (
    CategoryCreateRequest,
    CategoryListItem,
    CategoryResponse,
    CategoryUpdateRequest,
)
from app.schemas.common import (
    ErrorListResponse,
    IdResponse,
    MessageResponse,
    PageResponse,
)

router = APIRouter()

_NOT_FOUND = {404: {"model": MessageResponse}}
_UNPROCESSABLE = {422: {"model": ErrorListResponse}}


@router.post(
    "",
    response_model=IdResponse,
    status_code=201,
    responses=_UNPROCESSABLE,
)
@limit_writes
async def create_category(
    request: Request,
    body: CategoryCreateRequest,
    use_case: Annotated[CreateCategoryUseCase, Depends(get_create_category_use_case)],
):
    """Create a category. 201 with Location header, or 422 with every validation error."""
    result = await use_case.execute(
        CreateCategoryCommand(
            name=body.name,
            description=body.description,
            is_active=body.is_active if body.is_active is not None else True,
        )
    )
    if isinstance(result, Notification):
        return present_notification(result)
    location = request.app.url_path_for("get_category", category_id=result.id)
    return JSONResponse(
        status_code=201,
        content=IdResponse(id=result.id).model_dump(),
        headers={"Location": str(location)},
    )


@router.get("", response_model=PageResponse[CategoryListItem])
async def list_categories(
    query: Annotated[SearchQuery, Depends(get_search_query)],
    use_case: Annotated[ListCategoriesUseCase, Depends(get_list_categories_use_case)],
):
    """List categories (search over name and description, 0-based pages)."""
    return present_category_page(await use_case.execute(query))


@router.get("/{category_id}", response_model=CategoryResponse, responses=_NOT_FOUND)
async def get_category(
    category_id: str,
    use_case: Annotated[GetCategoryByIdUseCase, Depends(get_get_category_use_case)],
):
    """Get category by id."""
    return present_category(await use_case.execute(category_id))


@router.put(
    "/{category_id}",
    response_model=IdResponse,
    responses={**_NOT_FOUND, **_UNPROCESSABLE},
)
@limit_writes
async def update_category(
    request: Request,
    category_id: str,
    body: CategoryUpdateRequest,
    use_case: Annotated[UpdateCategoryUseCase, Depends(get_update_category_use_case)],
):
    """Replace name, description and active flag of a category."""
    result = await use_case.execute(
        UpdateCategoryCommand(
            id=category_id,
            name=body.name,
            description=body.description,
            is_active=body.is_active if body.is_active is not None else True,
        )
    )
    if isinstance(result, Notification):
        return present_notification(result)
    return IdResponse(id=result.id)


@router.delete("/{category_id}", status_code=204, response_class=Response)
@limit_writes
async def delete_category(
    request: Request,
    category_id: str,
    use_case: Annotated[DeleteCategoryUseCase, Depends(get_delete_category_use_case)],
):
    """Delete a category. Unknown ids are a silent success."""
    await use_case.execute(category_id)
    return Response(status_code=204)
