"""Update genre use case: load, replace fields and categories, validate, persist."""

from __future__ import annotations

import logging

from app.application.dtos.genre import UpdateGenreCommand, UpdateGenreOutput
from app.application.interfaces.gateways import IGenreGateway
from app.application.services.category_reference_validator import (
    CategoryReferenceValidator,
)
from app.domain.entities.genre import Genre
from app.domain.exceptions import NotFoundException
from app.domain.validation import Notification

logger = logging.getLogger(__name__)


class UpdateGenreUseCase:
    def __init__(
        self,
        genre_gateway: IGenreGateway,
        category_validator: CategoryReferenceValidator,
    ) -> None:
        self._genre_gateway = genre_gateway
        self._category_validator = category_validator

    async def execute(
        self, command: UpdateGenreCommand
    ) -> UpdateGenreOutput | Notification:
        """Apply the command to the stored genre.

        Raises:
            NotFoundException: If no genre has command.id.
        """
        genre = await self._genre_gateway.find_by_id(command.id)
        if genre is None:
            raise NotFoundException.of(Genre, command.id)
        notification = await self._category_validator.validate(command.categories)
        genre.update(command.name, command.is_active, command.categories)
        genre.validate(notification)
        if notification.has_errors():
            return notification
        try:
            updated = await self._genre_gateway.update(genre)
        except Exception as e:
            logger.warning("Failed to update genre %s: %s", genre.id, e)
            return Notification.create(e)
        logger.info("Genre updated: %s", updated.id)
        return UpdateGenreOutput.from_aggregate(updated)
