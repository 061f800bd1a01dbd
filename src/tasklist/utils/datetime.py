"""Utilities for datetime handling."""

from datetime import UTC, datetime


def now_utc() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC)


def now_local() -> datetime:
    """Get current local datetime (timezone-aware)."""
    return datetime.now().astimezone()


def now_ms() -> int:
    """Milliseconds since the epoch."""
    return int(now_utc().timestamp() * 1000)


def format_display(dt: datetime) -> str:
    """Format a datetime the way the task list shows it.

    Example: ``"October 19, 2026 at 09:03 AM"``
    """
    # %-d is not portable, so the day is formatted by hand
    return f"{dt:%B} {dt.day}, {dt:%Y} at {dt:%I:%M %p}"


def display_timestamp() -> str:
    """Current local time formatted for display."""
    return format_display(now_local())
