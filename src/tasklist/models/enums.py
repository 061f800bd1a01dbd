"""Enums for task list views."""

from enum import Enum


class View(str, Enum):
    """Which half of the task list is shown."""

    PENDING = "pending"
    COMPLETED = "completed"

    @property
    def shows_completed(self) -> bool:
        """Completion flag a task must have to appear in this view."""
        return self is View.COMPLETED

    def other(self) -> "View":
        """The opposite view (used by the tab switch)."""
        return View.PENDING if self is View.COMPLETED else View.COMPLETED
