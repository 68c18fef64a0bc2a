"""Genre aggregate.

A genre groups categories by reference (category IDs); it does not own them.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime

from app.domain.validation import Notification, validate_name
from app.shared.utils.datetime import utc_now
from app.shared.utils.generators import generate_cuid


@dataclass
class Genre:
    """Genre aggregate with an ordered, duplicate-free list of category IDs.

    Same soft-delete convention as Category: deleted_at is set while inactive.
    """

    id: str
    name: str | None
    active: bool
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None
    categories: list[str] = field(default_factory=list)

    @classmethod
    def new_genre(cls, name: str | None, active: bool) -> "Genre":
        """Create a genre with a fresh ID and no categories."""
        now = utc_now()
        return cls(
            id=generate_cuid(),
            name=name,
            active=active,
            created_at=now,
            updated_at=now,
            deleted_at=None if active else now,
        )

    def validate(self, notification: Notification) -> None:
        """Append name rule violations to notification."""
        validate_name(self.name, notification)

    def activate(self) -> "Genre":
        self.deleted_at = None
        self.active = True
        self.updated_at = utc_now()
        return self

    def deactivate(self) -> "Genre":
        if self.deleted_at is None:
            self.deleted_at = utc_now()
        self.active = False
        self.updated_at = utc_now()
        return self

    def update(
        self,
        name: str | None,
        active: bool,
        categories: Iterable[str] | None = None,
    ) -> "Genre":
        """Replace name, active flag and category list; refresh updated_at.

        Args:
            name: New name (validated later by validate()).
            active: New active flag; drives deleted_at.
            categories: Replacement category IDs; None clears the list.

        Returns:
            This genre.
        """
        if active:
            self.activate()
        else:
            self.deactivate()
        self.name = name
        self.categories = []
        self.add_categories(categories or [])
        self.updated_at = utc_now()
        return self

    def add_category(self, category_id: str | None) -> "Genre":
        """Append a category ID; None and duplicates are ignored."""
        if category_id is None or category_id in self.categories:
            return self
        self.categories.append(category_id)
        self.updated_at = utc_now()
        return self

    def add_categories(self, category_ids: Iterable[str | None]) -> "Genre":
        for category_id in category_ids:
            self.add_category(category_id)
        return self

    def remove_category(self, category_id: str | None) -> "Genre":
        """Remove a category ID if present."""
        if category_id is None or category_id not in self.categories:
            return self
        self.categories.remove(category_id)
        self.updated_at = utc_now()
        return self
