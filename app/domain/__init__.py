"""Domain layer: aggregates, validation notification, pagination, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.entities import Category, Genre
from app.domain.exceptions import (
    CatalogException,
    DomainException,
    NotFoundException,
    SqlNotConfiguredException,
)
from app.domain.pagination import Pagination, SearchQuery
from app.domain.validation import Error, Notification

__all__ = [
    # Aggregates
    "Category",
    "Genre",
    # Exceptions
    "CatalogException",
    "DomainException",
    "NotFoundException",
    "SqlNotConfiguredException",
    # Pagination
    "Pagination",
    "SearchQuery",
    # Validation
    "Error",
    "Notification",
]
