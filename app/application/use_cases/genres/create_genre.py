"""Create genre use case: validate name and category references, then persist."""

from __future__ import annotations

import logging

from app.application.dtos.genre import CreateGenreCommand, CreateGenreOutput
from app.application.interfaces.gateways import IGenreGateway
from app.application.services.category_reference_validator import (
    CategoryReferenceValidator,
)
from app.domain.entities.genre import Genre
from app.domain.validation import Notification

logger = logging.getLogger(__name__)


class CreateGenreUseCase:
    """Creates a genre linked to existing categories."""

    def __init__(
        self,
        genre_gateway: IGenreGateway,
        category_validator: CategoryReferenceValidator,
    ) -> None:
        self._genre_gateway = genre_gateway
        self._category_validator = category_validator

    async def execute(
        self, command: CreateGenreCommand
    ) -> CreateGenreOutput | Notification:
        """Validate and persist a new genre.

        Unknown category IDs and name violations are reported together in
        one notification. Storage failures are folded into a notification too.

        Returns:
            CreateGenreOutput on success, Notification otherwise.
        """
        notification = await self._category_validator.validate(command.categories)
        genre = Genre.new_genre(command.name, command.is_active)
        genre.validate(notification)
        if notification.has_errors():
            return notification
        genre.add_categories(command.categories)
        try:
            created = await self._genre_gateway.create(genre)
        except Exception as e:
            logger.warning("Failed to persist genre %s: %s", genre.id, e)
            return Notification.create(e)
        logger.info("Genre created: %s (%d categories)", created.id, len(created.categories))
        return CreateGenreOutput.from_aggregate(created)
