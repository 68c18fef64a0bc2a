"""Delete genre by id (idempotent; storage errors propagate)."""

from __future__ import annotations

import logging

from app.application.interfaces.gateways import IGenreGateway

logger = logging.getLogger(__name__)


class DeleteGenreUseCase:
    def __init__(self, genre_gateway: IGenreGateway) -> None:
        self._genre_gateway = genre_gateway

    async def execute(self, genre_id: str) -> None:
        await self._genre_gateway.delete_by_id(genre_id)
        logger.info("Genre deleted (if present): %s", genre_id)
