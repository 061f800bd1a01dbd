"""Task id allocation."""

from collections.abc import Callable, Iterable

from .datetime import now_ms


class IdAllocator:
    """Hands out strictly increasing, timestamp-derived task ids.

    An id is the current time in milliseconds unless that would not exceed
    the last id handed out, in which case it is ``last + 1``.
    """

    def __init__(self, clock: Callable[[], int] = now_ms) -> None:
        self._clock = clock
        self._last = 0

    @property
    def last(self) -> int:
        return self._last

    def seed(self, ids: Iterable[int]) -> None:
        """Make sure future ids are above every id in ``ids``."""
        self._last = max([self._last, *ids])

    def next_id(self) -> int:
        self._last = max(self._clock(), self._last + 1)
        return self._last
