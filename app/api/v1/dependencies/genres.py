"""Genre gateway and use-case dependencies (composition root).

Write use cases check category references through a category gateway on
the same transactional session as the genre gateway.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.gateways import IGenreGateway
from app.application.services.category_reference_validator import (
    CategoryReferenceValidator,
)
from app.application.use_cases.genres import (
    CreateGenreUseCase,
    DeleteGenreUseCase,
    GetGenreByIdUseCase,
    ListGenresUseCase,
    UpdateGenreUseCase,
)
from app.infrastructure.persistence.database import get_db, get_db_transactional
from app.infrastructure.persistence.gateways import CategorySqlGateway, GenreSqlGateway


async def get_genre_gateway(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> IGenreGateway:
    """Genre gateway for read paths."""
    return GenreSqlGateway(db)


async def get_genre_gateway_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> IGenreGateway:
    """Genre gateway bound to the request transaction (commit on success)."""
    return GenreSqlGateway(db)


async def get_category_reference_validator(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> CategoryReferenceValidator:
    """Validator over the write session (FastAPI caches get_db_transactional per request)."""
    return CategoryReferenceValidator(CategorySqlGateway(db))


async def get_create_genre_use_case(
    gateway: Annotated[IGenreGateway, Depends(get_genre_gateway_for_write)],
    validator: Annotated[
        CategoryReferenceValidator, Depends(get_category_reference_validator)
    ],
) -> CreateGenreUseCase:
    return CreateGenreUseCase(gateway, validator)


async def get_update_genre_use_case(
    gateway: Annotated[IGenreGateway, Depends(get_genre_gateway_for_write)],
    validator: Annotated[
        CategoryReferenceValidator, Depends(get_category_reference_validator)
    ],
) -> UpdateGenreUseCase:
    return UpdateGenreUseCase(gateway, validator)


async def get_delete_genre_use_case(
    gateway: Annotated[IGenreGateway, Depends(get_genre_gateway_for_write)],
) -> DeleteGenreUseCase:
    return DeleteGenreUseCase(gateway)


async def get_get_genre_use_case(
    gateway: Annotated[IGenreGateway, Depends(get_genre_gateway)],
) -> GetGenreByIdUseCase:
    return GetGenreByIdUseCase(gateway)


async def get_list_genres_use_case(
    gateway: Annotated[IGenreGateway, Depends(get_genre_gateway)],
) -> ListGenresUseCase:
    return ListGenresUseCase(gateway)
