"""Key-value storage contract."""

from typing import Protocol


class StorageProtocol(Protocol):
    """Interface for the key-value service tasks are persisted in.

    Keys and values are plain strings. Implementations raise
    ``StorageError`` (or a subclass) when an operation fails; a missing key
    is not a failure for ``get`` or ``delete``.
    """

    def list(self, prefix: str) -> list[str]:
        """Return every stored key that starts with ``prefix``."""
        ...

    def get(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None if absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...

    def delete(self, key: str) -> None:
        """Remove ``key``. Does not raise if the key doesn't exist."""
        ...
