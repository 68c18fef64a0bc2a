"""Delete category by id (idempotent; storage errors propagate)."""

from __future__ import annotations

import logging

from app.application.interfaces.gateways import ICategoryGateway

logger = logging.getLogger(__name__)


class DeleteCategoryUseCase:
    def __init__(self, category_gateway: ICategoryGateway) -> None:
        self._category_gateway = category_gateway

    async def execute(self, category_id: str) -> None:
        await self._category_gateway.delete_by_id(category_id)
        logger.info("Category deleted (if present): %s", category_id)
