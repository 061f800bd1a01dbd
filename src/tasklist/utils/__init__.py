"""Utility functions."""

from .datetime import display_timestamp, format_display, now_local, now_ms, now_utc
from .ids import IdAllocator

__all__ = [
    "IdAllocator",
    "display_timestamp",
    "format_display",
    "now_local",
    "now_ms",
    "now_utc",
]
