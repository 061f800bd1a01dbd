"""Construct the configured storage backend."""

import logging

from ..storage import DirectoryStorage, HttpStorage, MemoryStorage, StorageProtocol
from .settings import Settings

logger = logging.getLogger(__name__)


def build_storage(settings: Settings) -> StorageProtocol:
    """Create the key-value backend named by ``settings.storage``.

    Raises:
        ValueError: If the http backend is selected without a URL.
    """
    if settings.storage == "memory":
        logger.info("Using in-memory storage (nothing will be saved)")
        return MemoryStorage()

    if settings.storage == "http":
        if not settings.storage_url:
            raise ValueError("storage_url is required for the http backend")
        logger.info("Using HTTP storage at %s", settings.storage_url)
        return HttpStorage(
            settings.storage_url,
            token=settings.storage_token,
            timeout=settings.storage_timeout,
        )

    logger.info("Using directory storage at %s", settings.storage_dir)
    return DirectoryStorage(settings.storage_dir.expanduser())
