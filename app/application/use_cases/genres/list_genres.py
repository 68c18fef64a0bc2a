"""List genres: one page of GenreListOutput."""

from __future__ import annotations

from app.application.dtos.genre import GenreListOutput
from app.application.interfaces.gateways import IGenreGateway
from app.domain.pagination import Pagination, SearchQuery


class ListGenresUseCase:
    def __init__(self, genre_gateway: IGenreGateway) -> None:
        self._genre_gateway = genre_gateway

    async def execute(self, query: SearchQuery) -> Pagination[GenreListOutput]:
        page = await self._genre_gateway.find_all(query)
        return page.map(GenreListOutput.from_aggregate)
