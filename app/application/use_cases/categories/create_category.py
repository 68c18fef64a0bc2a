"""Create category use case: validate, then persist through ICategoryGateway."""

from __future__ import annotations

import logging

from app.application.dtos.category import CreateCategoryCommand, CreateCategoryOutput
from app.application.interfaces.gateways import ICategoryGateway
from app.domain.entities.category import Category
from app.domain.validation import Notification

logger = logging.getLogger(__name__)


class CreateCategoryUseCase:
    """Creates a category; returns the new ID or the notification of what failed."""

    def __init__(self, category_gateway: ICategoryGateway) -> None:
        self._category_gateway = category_gateway

    async def execute(
        self, command: CreateCategoryCommand
    ) -> CreateCategoryOutput | Notification:
        """Build and validate the aggregate; persist only when valid.

        Storage failures are not raised: they come back as a notification
        with a single error carrying the failure message.

        Returns:
            CreateCategoryOutput on success, Notification otherwise.
        """
        category = Category.new_category(
            command.name, command.description, command.is_active
        )
        notification = Notification.create()
        category.validate(notification)
        if notification.has_errors():
            return notification
        return await self._create(category)

    async def _create(self, category: Category) -> CreateCategoryOutput | Notification:
        try:
            created = await self._category_gateway.create(category)
        except Exception as e:
            logger.warning("Failed to persist category %s: %s", category.id, e)
            return Notification.create(e)
        logger.info("Category created: %s", created.id)
        return CreateCategoryOutput.from_aggregate(created)
