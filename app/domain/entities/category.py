"""Category aggregate.

Represents the business concept of a catalog category, independent of persistence.
"""

from dataclasses import dataclass, field
from datetime import datetime

from app.domain.validation import Notification, validate_name
from app.shared.utils.datetime import utc_now
from app.shared.utils.generators import generate_cuid


@dataclass
class Category:
    """Category aggregate (SRP: business logic separate from persistence).

    Validation is explicit: callers run validate(notification) before
    persisting. deleted_at is set while the category is inactive and
    cleared when it is activated again.
    """

    id: str
    name: str | None
    description: str | None
    active: bool
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = field(default=None)

    @classmethod
    def new_category(
        cls, name: str | None, description: str | None, active: bool
    ) -> "Category":
        """Create a category with a fresh ID; inactive categories start soft-deleted."""
        now = utc_now()
        return cls(
            id=generate_cuid(),
            name=name,
            description=description,
            active=active,
            created_at=now,
            updated_at=now,
            deleted_at=None if active else now,
        )

    def validate(self, notification: Notification) -> None:
        """Append name rule violations to notification."""
        validate_name(self.name, notification)

    def activate(self) -> "Category":
        """Mark active and clear the soft-delete marker."""
        self.deleted_at = None
        self.active = True
        self.updated_at = utc_now()
        return self

    def deactivate(self) -> "Category":
        """Mark inactive; deleted_at keeps its first value if already set."""
        if self.deleted_at is None:
            self.deleted_at = utc_now()
        self.active = False
        self.updated_at = utc_now()
        return self

    def update(
        self, name: str | None, description: str | None, active: bool
    ) -> "Category":
        """Replace mutable fields and refresh updated_at. Does not validate.

        Args:
            name: New name (validated later by validate()).
            description: New description (optional).
            active: New active flag; drives deleted_at.

        Returns:
            This category.
        """
        if active:
            self.activate()
        else:
            self.deactivate()
        self.name = name
        self.description = description
        self.updated_at = utc_now()
        return self
