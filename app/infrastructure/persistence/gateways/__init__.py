"""SQL gateways (infrastructure implementations of the application ports)."""

from app.infrastructure.persistence.gateways.base import SqlGateway, escape_like
from app.infrastructure.persistence.gateways.category_gateway import CategorySqlGateway
from app.infrastructure.persistence.gateways.genre_gateway import GenreSqlGateway

__all__ = [
    "CategorySqlGateway",
    "GenreSqlGateway",
    "SqlGateway",
    "escape_like",
]
