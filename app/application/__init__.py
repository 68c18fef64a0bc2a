"""Application layer: gateway interfaces, DTOs, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the gateways (SQLAlchemy).
"""

from app.application.interfaces import ICategoryGateway, IGenreGateway
from app.application.services import CategoryReferenceValidator

__all__ = [
    "CategoryReferenceValidator",
    "ICategoryGateway",
    "IGenreGateway",
]
