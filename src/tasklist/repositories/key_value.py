"""Key-value backed task repository."""

from __future__ import annotations

import logging

from ..models import Task
from ..storage import StorageError, StorageProtocol

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "todo"


class KeyValueTaskRepository:
    """
    Repository storing each task as a JSON value in a key-value service.

    Every task lives under ``<namespace>:<id>``. The key is the only link
    between a stored value and its task id, so listing the namespace is how
    the full task set is rebuilt.
    """

    SEPARATOR = ":"

    def __init__(self, storage: StorageProtocol, namespace: str = DEFAULT_NAMESPACE) -> None:
        self.storage = storage
        self.namespace = namespace

    @property
    def prefix(self) -> str:
        return f"{self.namespace}{self.SEPARATOR}"

    def key_for(self, task_id: int) -> str:
        """Storage key for a task id."""
        return f"{self.prefix}{task_id}"

    def id_from_key(self, key: str) -> int | None:
        """Task id encoded in a key, or None if the key isn't a task key."""
        if not key.startswith(self.prefix):
            return None
        suffix = key[len(self.prefix) :]
        if not suffix.isdecimal():
            return None
        task_id = int(suffix)
        # Only the canonical spelling counts; todo:012 would never be written
        # or deleted by save/remove
        if key != self.key_for(task_id):
            return None
        return task_id

    # --- Task Operations ---

    def list_all(self) -> list[Task]:
        """Load all tasks, newest first."""
        try:
            keys = self.storage.list(self.prefix)
        except StorageError as e:
            logger.warning("Storage unavailable, starting with no tasks: %s", e)
            return []

        tasks: dict[int, Task] = {}
        for key in keys:
            task = self._load(key)
            if task is not None:
                tasks[task.id] = task

        logger.info("Loaded %d of %d stored tasks", len(tasks), len(keys))
        return sorted(tasks.values(), key=lambda t: t.id, reverse=True)

    def save(self, task: Task) -> bool:
        """Write a task under its key."""
        key = self.key_for(task.id)
        try:
            self.storage.set(key, task.to_json())
        except StorageError as e:
            logger.error("Failed to save task %s: %s", key, e)
            return False
        logger.debug("Saved task %s", key)
        return True

    def remove(self, task_id: int) -> bool:
        """Delete a task's key."""
        key = self.key_for(task_id)
        try:
            self.storage.delete(key)
        except StorageError as e:
            logger.error("Failed to delete task %s: %s", key, e)
            return False
        logger.debug("Deleted task %s", key)
        return True

    # --- Private Methods ---

    def _load(self, key: str) -> Task | None:
        """Fetch and parse one entry, or None if it can't be recovered."""
        task_id = self.id_from_key(key)
        if task_id is None:
            logger.debug("Skipping foreign key %s", key)
            return None

        try:
            data = self.storage.get(key)
        except (StorageError, ValueError) as e:
            logger.debug("Dropping %s, fetch failed: %s", key, e)
            return None
        if data is None:
            return None

        try:
            task = Task.from_json(data)
        except ValueError as e:
            logger.debug("Dropping %s, unparseable: %s", key, e)
            return None

        if task.id != task_id:
            logger.debug("Dropping %s, stored id %d does not match key", key, task.id)
            return None
        return task
