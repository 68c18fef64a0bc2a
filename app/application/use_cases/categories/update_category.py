"""Update category use case: load, mutate, validate, persist."""

from __future__ import annotations

import logging

from app.application.dtos.category import UpdateCategoryCommand, UpdateCategoryOutput
from app.application.interfaces.gateways import ICategoryGateway
from app.domain.entities.category import Category
from app.domain.exceptions import NotFoundException
from app.domain.validation import Notification

logger = logging.getLogger(__name__)


class UpdateCategoryUseCase:
    """Updates name, description and active flag of an existing category."""

    def __init__(self, category_gateway: ICategoryGateway) -> None:
        self._category_gateway = category_gateway

    async def execute(
        self, command: UpdateCategoryCommand
    ) -> UpdateCategoryOutput | Notification:
        """Apply the command to the stored category.

        Raises:
            NotFoundException: If no category has command.id.
        """
        category = await self._category_gateway.find_by_id(command.id)
        if category is None:
            raise NotFoundException.of(Category, command.id)
        notification = Notification.create()
        category.update(command.name, command.description, command.is_active)
        category.validate(notification)
        if notification.has_errors():
            return notification
        return await self._update(category)

    async def _update(self, category: Category) -> UpdateCategoryOutput | Notification:
        try:
            updated = await self._category_gateway.update(category)
        except Exception as e:
            logger.warning("Failed to update category %s: %s", category.id, e)
            return Notification.create(e)
        logger.info("Category updated: %s", updated.id)
        return UpdateCategoryOutput.from_aggregate(updated)
