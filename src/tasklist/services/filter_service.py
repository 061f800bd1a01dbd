"""Service for filtering the task list."""

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass

from ..models import Task, View


@dataclass(frozen=True)
class Filter:
    """Search text plus the view (pending or completed) being shown."""

    text: str = ""
    view: View = View.PENDING

    def matches(self, task: Task) -> bool:
        """Check if a task matches the filter."""
        if task.completed != self.view.shows_completed:
            return False
        return task.matches(self.text)


class FilteredView:
    """
    Lazy view over a task sequence.

    Nothing is computed until iteration, and every iteration re-reads the
    source, so the same view can be iterated any number of times and always
    reflects the current tasks.
    """

    def __init__(self, source: Callable[[], Sequence[Task]], filter_: Filter) -> None:
        self._source = source
        self.filter = filter_

    def __iter__(self) -> Iterator[Task]:
        return (task for task in self._source() if self.filter.matches(task))

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return any(True for _ in self)


class FilterService:
    """Service for building filtered views."""

    def view(self, source: Callable[[], Sequence[Task]], filter_: Filter) -> FilteredView:
        """Lazy, restartable filtered view over ``source()``."""
        return FilteredView(source, filter_)
