"""Repository layer for data access."""

from .key_value import DEFAULT_NAMESPACE, KeyValueTaskRepository
from .protocol import TaskRepositoryProtocol

__all__ = [
    "DEFAULT_NAMESPACE",
    "KeyValueTaskRepository",
    "TaskRepositoryProtocol",
]
