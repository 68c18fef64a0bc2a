"""Checks that category IDs referenced by a genre exist (via ICategoryGateway)."""

from __future__ import annotations

from collections.abc import Iterable

from app.application.interfaces.gateways import ICategoryGateway
from app.domain.validation import Error, Notification


class CategoryReferenceValidator:
    """Reports missing category IDs as a single notification error."""

    def __init__(self, category_gateway: ICategoryGateway) -> None:
        self.category_gateway = category_gateway

    async def validate(self, category_ids: Iterable[str]) -> Notification:
        """Return a notification with one error listing every unknown ID (empty if all exist)."""
        notification = Notification.create()
        ids = list(dict.fromkeys(category_ids))
        if not ids:
            return notification
        found = set(await self.category_gateway.exists_by_ids(ids))
        missing = [category_id for category_id in ids if category_id not in found]
        if missing:
            notification.append(
                Error(f"Some categories could not be found: {', '.join(missing)}")
            )
        return notification
