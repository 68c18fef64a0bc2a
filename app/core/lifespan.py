"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py;
no business logic here, only wiring of infrastructure (DB engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit dispose the SQL engine.

    The engine itself is created lazily by the first session request.
    """
    settings = get_settings()
    logger.info("%s %s starting", settings.app_name, settings.app_version)
    if not settings.database_url:
        logger.warning("DATABASE_URL not set; catalog routes will answer 503")

    yield

    # ---- Shutdown ----
    from app.infrastructure.persistence import database

    await database.dispose_engine()
    logger.info("%s stopped", settings.app_name)
