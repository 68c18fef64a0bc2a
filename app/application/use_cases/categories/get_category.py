"""Get category by id."""

from __future__ import annotations

from app.application.dtos.category import CategoryOutput
from app.application.interfaces.gateways import ICategoryGateway
from app.domain.entities.category import Category
from app.domain.exceptions import NotFoundException


class GetCategoryByIdUseCase:
    def __init__(self, category_gateway: ICategoryGateway) -> None:
        self._category_gateway = category_gateway

    async def execute(self, category_id: str) -> CategoryOutput:
        """Return the category output; raise NotFoundException if absent."""
        category = await self._category_gateway.find_by_id(category_id)
        if category is None:
            raise NotFoundException.of(Category, category_id)
        return CategoryOutput.from_aggregate(category)
