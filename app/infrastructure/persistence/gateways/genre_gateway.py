"""Genre gateway: SQLAlchemy implementation of IGenreGateway.

Category references are stored in genre_category; position keeps the
aggregate's list order.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.entities import Genre
from app.domain.exceptions import NotFoundException
from app.domain.pagination import Pagination, SearchQuery
from app.infrastructure.persistence.gateways.base import SqlGateway
from app.infrastructure.persistence.models.genre import GenreCategoryModel, GenreModel
from app.shared.utils.datetime import ensure_utc

GENRE_SORT_COLUMNS = {
    "name": GenreModel.name,
    "created_at": GenreModel.created_at,
    "createdAt": GenreModel.created_at,
    "updated_at": GenreModel.updated_at,
    "updatedAt": GenreModel.updated_at,
}


def _to_aggregate(row: GenreModel) -> Genre:
    return Genre(
        id=row.id,
        name=row.name,
        active=row.active,
        created_at=ensure_utc(row.created_at),
        updated_at=ensure_utc(row.updated_at),
        deleted_at=ensure_utc(row.deleted_at) if row.deleted_at else None,
        categories=[link.category_id for link in row.categories],
    )


def _apply(row: GenreModel, genre: Genre) -> GenreModel:
    """Copy scalar fields and sync category links (keep, add, drop, reorder)."""
    row.name = genre.name
    row.active = genre.active
    row.created_at = genre.created_at
    row.updated_at = genre.updated_at
    row.deleted_at = genre.deleted_at

    existing = {link.category_id: link for link in row.categories}
    links: list[GenreCategoryModel] = []
    for position, category_id in enumerate(genre.categories):
        link = existing.get(category_id)
        if link is None:
            link = GenreCategoryModel(category_id=category_id)
        link.position = position
        links.append(link)
    row.categories = links
    return row


class GenreSqlGateway(SqlGateway[GenreModel]):
    """Genre persistence; search matches name only."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(
            db,
            GenreModel,
            sort_columns=GENRE_SORT_COLUMNS,
            search_columns=(GenreModel.name,),
        )

    async def create(self, genre: Genre) -> Genre:
        row = GenreModel(id=genre.id, categories=[])
        return _to_aggregate(await self._save(row, lambda r: _apply(r, genre)))

    async def update(self, genre: Genre) -> Genre:
        row = await self._get_row(genre.id)
        if row is None:
            raise NotFoundException.of(Genre, genre.id)
        return _to_aggregate(await self._save(row, lambda r: _apply(r, genre)))

    async def find_by_id(self, genre_id: str) -> Genre | None:
        row = await self._get_row(genre_id)
        return _to_aggregate(row) if row is not None else None

    async def find_all(self, query: SearchQuery) -> Pagination[Genre]:
        return await self._paginate(query, _to_aggregate)
