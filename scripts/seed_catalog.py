"""Seed categories and genres from scripts/catalog-seed.json into Postgres.

Goes through the create use cases, so names and category references are
validated exactly as for API requests. Genres reference categories by name.
Existing categories (same name) are reused, not duplicated.

Usage:
    python -m scripts.seed_catalog [path/to/catalog-seed.json]

Requires: DATABASE_URL (postgresql+asyncpg://...), schema migrated
(alembic upgrade head).
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

from app.application.dtos.category import CreateCategoryCommand
from app.application.dtos.genre import CreateGenreCommand
from app.application.services.category_reference_validator import (
    CategoryReferenceValidator,
)
from app.application.use_cases.categories import CreateCategoryUseCase
from app.application.use_cases.genres import CreateGenreUseCase
from app.domain.pagination import SearchQuery
from app.domain.validation import Notification
from app.infrastructure.persistence.gateways import CategorySqlGateway, GenreSqlGateway


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


async def _existing_category_id(gateway: CategorySqlGateway, name: str) -> str | None:
    page = await gateway.find_all(SearchQuery(per_page=100, terms=name))
    for category in page.items:
        if category.name == name:
            return category.id
    return None


async def run(path: Path) -> None:
    _load_env()
    data = json.loads(path.read_text(encoding="utf-8"))

    from app.core.config import get_settings
    from app.infrastructure.persistence import database as db_mod

    get_settings.cache_clear()
    db_mod._ensure_engine()
    if db_mod.AsyncSessionLocal is None:
        print(
            "AsyncSessionLocal not configured. Set DATABASE_URL and run: alembic upgrade head",
            file=sys.stderr,
        )
        sys.exit(1)

    async with db_mod.AsyncSessionLocal() as session:
        async with session.begin():
            category_gateway = CategorySqlGateway(session)
            create_category = CreateCategoryUseCase(category_gateway)
            create_genre = CreateGenreUseCase(
                GenreSqlGateway(session), CategoryReferenceValidator(category_gateway)
            )

            category_ids: dict[str, str] = {}
            for c in data.get("categories", []):
                existing = await _existing_category_id(category_gateway, c["name"])
                if existing:
                    category_ids[c["name"]] = existing
                    print(f"Category {c['name']} already exists -> {existing}")
                    continue
                result = await create_category.execute(
                    CreateCategoryCommand(
                        name=c["name"],
                        description=c.get("description"),
                        is_active=c.get("is_active", True),
                    )
                )
                if isinstance(result, Notification):
                    print(f"  Skip category {c['name']}: {result.errors}", file=sys.stderr)
                    continue
                category_ids[c["name"]] = result.id
                print(f"Category {c['name']} -> {result.id}")

            for g in data.get("genres", []):
                result = await create_genre.execute(
                    CreateGenreCommand(
                        name=g["name"],
                        is_active=g.get("is_active", True),
                        categories=[
                            category_ids.get(name, name) for name in g.get("categories", [])
                        ],
                    )
                )
                if isinstance(result, Notification):
                    print(f"  Skip genre {g['name']}: {result.errors}", file=sys.stderr)
                    continue
                print(f"Genre {g['name']} -> {result.id}")

    await db_mod.dispose_engine()
    print("Seed completed.")


def main() -> None:
    root = _project_root()
    path_arg = sys.argv[1] if len(sys.argv) > 1 else None
    path = Path(path_arg) if path_arg else root / "scripts" / "catalog-seed.json"
    if not path.is_absolute():
        path = (root / path).resolve()
    asyncio.run(run(path))


if __name__ == "__main__":
    main()
