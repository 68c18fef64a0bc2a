"""List categories: one page of CategoryListOutput."""

from __future__ import annotations

from app.application.dtos.category import CategoryListOutput
from app.application.interfaces.gateways import ICategoryGateway
from app.domain.pagination import Pagination, SearchQuery


class ListCategoriesUseCase:
    """Delegates filtering/sorting/paging to the gateway and maps each item."""

    def __init__(self, category_gateway: ICategoryGateway) -> None:
        self._category_gateway = category_gateway

    async def execute(self, query: SearchQuery) -> Pagination[CategoryListOutput]:
        page = await self._category_gateway.find_all(query)
        return page.map(CategoryListOutput.from_aggregate)
