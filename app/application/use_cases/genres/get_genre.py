"""Get genre by id."""

from __future__ import annotations

from app.application.dtos.genre import GenreOutput
from app.application.interfaces.gateways import IGenreGateway
from app.domain.entities.genre import Genre
from app.domain.exceptions import NotFoundException


class GetGenreByIdUseCase:
    def __init__(self, genre_gateway: IGenreGateway) -> None:
        self._genre_gateway = genre_gateway

    async def execute(self, genre_id: str) -> GenreOutput:
        genre = await self._genre_gateway.find_by_id(genre_id)
        if genre is None:
            raise NotFoundException.of(Genre, genre_id)
        return GenreOutput.from_aggregate(genre)
