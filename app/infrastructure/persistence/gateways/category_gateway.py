"""Category gateway: SQLAlchemy implementation of ICategoryGateway."""

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.entities import Category
from app.domain.exceptions import NotFoundException
from app.domain.pagination import Pagination, SearchQuery
from app.infrastructure.persistence.gateways.base import SqlGateway
from app.infrastructure.persistence.models.category import CategoryModel
from app.shared.utils.datetime import ensure_utc

CATEGORY_SORT_COLUMNS = {
    "name": CategoryModel.name,
    "description": CategoryModel.description,
    "created_at": CategoryModel.created_at,
    "createdAt": CategoryModel.created_at,
    "updated_at": CategoryModel.updated_at,
    "updatedAt": CategoryModel.updated_at,
}


def _to_aggregate(row: CategoryModel) -> Category:
    return Category(
        id=row.id,
        name=row.name,
        description=row.description,
        active=row.active,
        created_at=ensure_utc(row.created_at),
        updated_at=ensure_utc(row.updated_at),
        deleted_at=ensure_utc(row.deleted_at) if row.deleted_at else None,
    )


def _apply(row: CategoryModel, category: Category) -> CategoryModel:
    row.name = category.name
    row.description = category.description
    row.active = category.active
    row.created_at = category.created_at
    row.updated_at = category.updated_at
    row.deleted_at = category.deleted_at
    return row


class CategorySqlGateway(SqlGateway[CategoryModel]):
    """Category persistence; search matches name or description."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(
            db,
            CategoryModel,
            sort_columns=CATEGORY_SORT_COLUMNS,
            search_columns=(CategoryModel.name, CategoryModel.description),
        )

    async def create(self, category: Category) -> Category:
        row = CategoryModel(id=category.id)
        return _to_aggregate(await self._save(row, lambda r: _apply(r, category)))

    async def update(self, category: Category) -> Category:
        row = await self._get_row(category.id)
        if row is None:
            raise NotFoundException.of(Category, category.id)
        return _to_aggregate(await self._save(row, lambda r: _apply(r, category)))

    async def find_by_id(self, category_id: str) -> Category | None:
        row = await self._get_row(category_id)
        return _to_aggregate(row) if row is not None else None

    async def find_all(self, query: SearchQuery) -> Pagination[Category]:
        return await self._paginate(query, _to_aggregate)

    async def exists_by_ids(self, category_ids: Iterable[str]) -> list[str]:
        """Return the ids (in input order, deduplicated) that exist in storage."""
        wanted = list(dict.fromkeys(category_ids))
        if not wanted:
            return []
        result = await self.db.execute(
            select(CategoryModel.id).where(CategoryModel.id.in_(wanted))
        )
        found = set(result.scalars().all())
        return [category_id for category_id in wanted if category_id in found]
