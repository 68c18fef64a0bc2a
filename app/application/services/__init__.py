"""Application services shared by several use cases."""

from app.application.services.category_reference_validator import (
    CategoryReferenceValidator,
)

__all__ = ["CategoryReferenceValidator"]
