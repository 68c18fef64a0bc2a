"""Base gateway: shared row lookup, savepoint-guarded writes and paginated search."""

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from sqlalchemy import ColumnElement, Select, delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.exceptions import DomainException
from app.domain.pagination import SORT_ASC, SORT_DESC, Pagination, SearchQuery
from app.domain.validation import Error
from app.infrastructure.persistence.database import Base

logger = logging.getLogger(__name__)

LIKE_ESCAPE = "\\"


def escape_like(terms: str) -> str:
    """Escape LIKE metacharacters so user terms match literally."""
    return (
        terms.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )


class SqlGateway[ModelType: Base]:
    """Base SQL gateway with get_row, save, delete_by_id and paginate.

    Subclasses provide the aggregate mapping and the whitelist of sortable
    and searchable columns. Writes run inside a SAVEPOINT so a failed flush
    leaves the request transaction usable.
    """

    def __init__(
        self,
        db: AsyncSession,
        model: type[ModelType],
        sort_columns: Mapping[str, Any],
        search_columns: Sequence[Any],
    ) -> None:
        self.db = db
        self.model = model
        self._sort_columns = sort_columns
        self._search_columns = search_columns

    async def _get_row(self, entity_id: str) -> ModelType | None:
        """Return a single row by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def _save(
        self, row: ModelType, apply: Callable[[ModelType], object]
    ) -> ModelType:
        """Run apply(row), add and flush, all inside one savepoint; then refresh.

        begin_nested() flushes pending changes before emitting SAVEPOINT, so
        the row must still be clean when it is entered.
        """
        async with self.db.begin_nested():
            apply(row)
            self.db.add(row)
            await self.db.flush()
        await self.db.refresh(row)
        return row

    async def delete_by_id(self, entity_id: str) -> None:
        """Delete by primary key. No row is not an error."""
        model: Any = self.model
        result = await self.db.execute(delete(self.model).where(model.id == entity_id))
        if result.rowcount:
            logger.debug("Deleted %s %s", self.model.__tablename__, entity_id)

    def _order_by(self, query: SearchQuery) -> list[Any]:
        column = self._sort_columns.get(query.sort)
        if column is None:
            raise DomainException.with_error(Error(f"Invalid sort field: {query.sort}"))
        direction = (query.direction or "").lower()
        if direction not in (SORT_ASC, SORT_DESC):
            raise DomainException.with_error(
                Error(f"Invalid sort direction: {query.direction}")
            )
        model: Any = self.model
        if direction == SORT_DESC:
            return [column.desc(), model.id.desc()]
        return [column.asc(), model.id.asc()]

    def _search_filter(self, terms: str) -> ColumnElement[bool] | None:
        stripped = (terms or "").strip()
        if not stripped:
            return None
        pattern = f"%{escape_like(stripped)}%"
        return or_(
            *(column.ilike(pattern, escape=LIKE_ESCAPE) for column in self._search_columns)
        )

    async def _paginate[T](
        self, query: SearchQuery, to_aggregate: Callable[[ModelType], T]
    ) -> Pagination[T]:
        """Run filtered count + page select; map rows with to_aggregate."""
        order_by = self._order_by(query)
        stmt: Select[Any] = select(self.model)
        criteria = self._search_filter(query.terms)
        if criteria is not None:
            stmt = stmt.where(criteria)

        count_stmt = select(func.count()).select_from(stmt.subquery())
        total = (await self.db.execute(count_stmt)).scalar_one()

        page = max(query.page, 0)
        per_page = max(query.per_page, 1)
        result = await self.db.execute(
            stmt.order_by(*order_by).offset(page * per_page).limit(per_page)
        )
        rows = list(result.scalars().all())
        return Pagination(
            current_page=page,
            per_page=per_page,
            total=total,
            items=[to_aggregate(row) for row in rows],
        )
