"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from app.api.v1.dependencies (no manual gateway/use-case construction).
"""

from fastapi import APIRouter

from app.api.v1.endpoints import categories, genres, health

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
api_router.include_router(genres.router, prefix="/genres", tags=["genres"])
