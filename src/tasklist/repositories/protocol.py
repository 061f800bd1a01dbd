"""Repository protocol for task persistence."""

from typing import Protocol

from ..models import Task


class TaskRepositoryProtocol(Protocol):
    """Interface between the task list and whatever persists it.

    None of these methods raise. Reads degrade to "nothing found" and writes
    report success as a boolean, so callers never need error handling.
    """

    def list_all(self) -> list[Task]:
        """Load every stored task, newest (highest id) first.

        Entries that cannot be fetched or parsed are left out.
        """
        ...

    def save(self, task: Task) -> bool:
        """Create or replace the stored copy of ``task``.

        Returns:
            True if the write succeeded.
        """
        ...

    def remove(self, task_id: int) -> bool:
        """Delete the stored copy of a task.

        Returns:
            True if the delete succeeded (including when nothing was stored).
        """
        ...
