"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for gateways and application use cases.
All use cases are built from infrastructure implementations here;
routes depend only on these dependencies, not on infra directly.
"""

from app.api.v1.dependencies.categories import (
    get_category_gateway,
    get_category_gateway_for_write,
    get_create_category_use_case,
    get_delete_category_use_case,
    get_get_category_use_case,
    get_list_categories_use_case,
    get_update_category_use_case,
)
from app.api.v1.dependencies.common import get_search_query
from app.api.v1.dependencies.genres import (
    get_category_reference_validator,
    get_create_genre_use_case,
    get_delete_genre_use_case,
    get_genre_gateway,
    get_genre_gateway_for_write,
    get_get_genre_use_case,
    get_list_genres_use_case,
    get_update_genre_use_case,
)

__all__ = [
    "get_category_gateway",
    "get_category_gateway_for_write",
    "get_category_reference_validator",
    "get_create_category_use_case",
    "get_create_genre_use_case",
    "get_delete_category_use_case",
    "get_delete_genre_use_case",
    "get_genre_gateway",
    "get_genre_gateway_for_write",
    "get_get_category_use_case",
    "get_get_genre_use_case",
    "get_list_categories_use_case",
    "get_list_genres_use_case",
    "get_search_query",
    "get_update_category_use_case",
    "get_update_genre_use_case",
]
