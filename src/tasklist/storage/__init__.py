"""Key-value storage backends."""

from .directory import DirectoryStorage
from .errors import StorageError, StorageResponseError, StorageUnavailableError
from .http import HttpStorage
from .memory import MemoryStorage
from .protocol import StorageProtocol

__all__ = [
    "DirectoryStorage",
    "HttpStorage",
    "MemoryStorage",
    "StorageError",
    "StorageProtocol",
    "StorageResponseError",
    "StorageUnavailableError",
]
