"""Validation notification: collects every rule violation of one mutation attempt.

Aggregates append to a Notification in validate(); use cases inspect
has_errors() to decide whether to persist. Nothing here raises.
"""

from __future__ import annotations

from dataclasses import dataclass

NAME_MAX_LENGTH = 255


@dataclass(frozen=True)
class Error:
    """A single validation error (rendered as {"message": ...})."""

    message: str


class Notification:
    """Ordered accumulator of validation errors."""

    def __init__(self, errors: list[Error] | None = None) -> None:
        self._errors: list[Error] = list(errors or [])

    @classmethod
    def create(cls, error: Error | BaseException | None = None) -> Notification:
        """Return a new notification, empty or seeded with one error.

        An exception is converted to an Error carrying its message.
        """
        if error is None:
            return cls()
        if isinstance(error, BaseException):
            return cls([Error(str(error))])
        return cls([error])

    def append(self, error: Error) -> Notification:
        self._errors.append(error)
        return self

    def append_all(self, other: Notification) -> Notification:
        self._errors.extend(other.errors)
        return self

    @property
    def errors(self) -> list[Error]:
        return list(self._errors)

    def has_errors(self) -> bool:
        return bool(self._errors)

    def first_error(self) -> Error | None:
        return self._errors[0] if self._errors else None

    def __len__(self) -> int:
        return len(self._errors)

    def __repr__(self) -> str:
        return f"Notification(errors={self._errors!r})"


def validate_name(name: str | None, notification: Notification) -> None:
    """Append at most one error for a required, bounded name.

    Blankness is judged on the stripped name; the length bound applies to the
    name as stored (surrounding whitespace counts).
    """
    if name is None:
        notification.append(Error("'name' should not be null"))
        return
    stripped = name.strip()
    if not stripped:
        notification.append(Error("'name' should not be empty"))
        return
    if len(name) > NAME_MAX_LENGTH:
        notification.append(
            Error(f"'name' must be between 1 and {NAME_MAX_LENGTH} characters")
        )
