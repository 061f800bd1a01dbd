"""Configuration."""

from .settings import CONFIG_FILE, Settings
from .storage_factory import build_storage

__all__ = [
    "CONFIG_FILE",
    "Settings",
    "build_storage",
]
