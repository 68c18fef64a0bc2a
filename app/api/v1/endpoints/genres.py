"""Genre API: thin routes delegating to genre use cases."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from app.api.v1.dependencies import (
    get_create_genre_use_case,
    get_delete_genre_use_case,
    get_get_genre_use_case,
    get_list_genres_use_case,
    get_search_query,
    get_update_genre_use_case,
)
from app.api.v1.presenters import present_genre, present_genre_page, present_notification
from app.application.dtos.genre import CreateGenreCommand, UpdateGenreCommand
from app.application.use_cases.genres import (
    CreateGenreUseCase,
    DeleteGenreUseCase,
    GetGenreByIdUseCase,
    ListGenresUseCase,
    UpdateGenreUseCase,
)
from app.core.limiter import limit_writes
from app.domain.pagination import SearchQuery
from app.domain.validation import Notification
from app.schemas.common import (
    ErrorListResponse,
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

router = APIRouter()

_NOT_FOUND = {404: {"model": MessageResponse}}
_UNPROCESSABLE = {422: {"model": ErrorListResponse}}


@router.post("", response_model=IdResponse, status_code=201, responses=_UNPROCESSABLE)
@limit_writes
async def create_genre(
    request: Request,
    body: GenreCreateRequest,
    use_case: Annotated[CreateGenreUseCase, Depends(get_create_genre_use_case)],
):
    """Create a genre referencing existing categories."""
    result = await use_case.execute(
        CreateGenreCommand(
            name=body.name,
            is_active=body.is_active if body.is_active is not None else True,
            categories=list(body.categories_id or []),
        )
    )
    if isinstance(result, Notification):
        return present_notification(result)
    location = request.app.url_path_for("get_genre", genre_id=result.id)
    return JSONResponse(
        status_code=201,
        content=IdResponse(id=result.id).model_dump(),
        headers={"Location": str(location)},
    )


@router.get("", response_model=PageResponse[GenreListItem])
async def list_genres(
    query: Annotated[SearchQuery, Depends(get_search_query)],
    use_case: Annotated[ListGenresUseCase, Depends(get_list_genres_use_case)],
):
    """List genres (search over name, 0-based pages)."""
    return present_genre_page(await use_case.execute(query))


@router.get("/{genre_id}", response_model=GenreResponse, responses=_NOT_FOUND)
async def get_genre(
    genre_id: str,
    use_case: Annotated[GetGenreByIdUseCase, Depends(get_get_genre_use_case)],
):
    """Get genre by id, including its category ids."""
    return present_genre(await use_case.execute(genre_id))


@router.put(
    "/{genre_id}",
    response_model=IdResponse,
    responses={**_NOT_FOUND, **_UNPROCESSABLE},
)
@limit_writes
async def update_genre(
    request: Request,
    genre_id: str,
    body: GenreUpdateRequest,
    use_case: Annotated[UpdateGenreUseCase, Depends(get_update_genre_use_case)],
):
    """Replace name, active flag and category list of a genre."""
    result = await use_case.execute(
        UpdateGenreCommand(
            id=genre_id,
            name=body.name,
            is_active=body.is_active if body.is_active is not None else True,
            categories=list(body.categories_id or []),
        )
    )
    if isinstance(result, Notification):
        return present_notification(result)
    return IdResponse(id=result.id)


@router.delete("/{genre_id}", status_code=204, response_class=Response)
@limit_writes
async def delete_genre(
    request: Request,
    genre_id: str,
    use_case: Annotated[DeleteGenreUseCase, Depends(get_delete_genre_use_case)],
):
    """Delete a genre and its category links. Unknown ids are a silent success."""
    await use_case.execute(genre_id)
    return Response(status_code=204)
