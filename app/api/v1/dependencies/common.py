"""Shared list-query dependency: page, perPage, sort, dir, search -> SearchQuery."""

from typing import Annotated

from fastapi import Query

from app.core.config import get_settings
from app.domain.pagination import SORT_ASC, SearchQuery


def get_search_query(
    page: Annotated[int, Query(ge=0, description="0-based page index")] = 0,
    per_page: Annotated[int | None, Query(alias="perPage", ge=1)] = None,
    sort: Annotated[str, Query()] = "name",
    direction: Annotated[str, Query(alias="dir")] = SORT_ASC,
    search: Annotated[str, Query()] = "",
) -> SearchQuery:
    """Build SearchQuery from query params; perPage is capped at max_page_size.

    Unknown sort fields and directions are rejected by the gateway.
    """
    settings = get_settings()
    size = per_page if per_page is not None else settings.default_page_size
    return SearchQuery(
        page=page,
        per_page=min(size, settings.max_page_size),
        terms=search,
        sort=sort,
        direction=direction,
    )
