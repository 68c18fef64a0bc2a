"""Category gateway and use-case dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.gateways import ICategoryGateway
from app.application.use_cases.categories import (
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    GetCategoryByIdUseCase,
    ListCategoriesUseCase,
    UpdateCategoryUseCase,
)
from app.infrastructure.persistence.database import get_db, get_db_transactional
from app.infrastructure.persistence.gateways import CategorySqlGateway


async def get_category_gateway(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ICategoryGateway:
    """Category gateway for read paths."""
    return CategorySqlGateway(db)


async def get_category_gateway_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> ICategoryGateway:
    """Category gateway bound to the request transaction (commit on success)."""
    return CategorySqlGateway(db)


async def get_create_category_use_case(
    gateway: Annotated[ICategoryGateway, Depends(get_category_gateway_for_write)],
) -> CreateCategoryUseCase:
    return CreateCategoryUseCase(gateway)


async def get_update_category_use_case(
    gateway: Annotated[ICategoryGateway, Depends(get_category_gateway_for_write)],
) -> UpdateCategoryUseCase:
    return UpdateCategoryUseCase(gateway)


async def get_delete_category_use_case(
    gateway: Annotated[ICategoryGateway, Depends(get_category_gateway_for_write)],
) -> DeleteCategoryUseCase:
    return DeleteCategoryUseCase(gateway)


async def get_get_category_use_case(
    gateway: Annotated[ICategoryGateway, Depends(get_category_gateway)],
) -> GetCategoryByIdUseCase:
    return GetCategoryByIdUseCase(gateway)


async def get_list_categories_use_case(
    gateway: Annotated[ICategoryGateway, Depends(get_category_gateway)],
) -> ListCategoriesUseCase:
    return ListCategoriesUseCase(gateway)
