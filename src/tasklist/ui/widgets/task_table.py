"""Task table widget."""

from rich.text import Text
from textual.widgets import DataTable

from ...models import Task

COLUMNS = ("ID", "Title", "Description", "Date Created/Updated")


def task_cells(task: Task) -> tuple[str, Text, Text, Text]:
    """Row cells for a task.

    Everything the user typed is wrapped in ``Text`` so brackets are shown
    as-is instead of being parsed as markup.
    """
    title = Text(task.title, style="strike dim" if task.completed else "bold")
    return str(task.id), title, Text(task.description), Text(task.date_created)


class TaskTable(DataTable):
    """Table of tasks, one row per task, keyed by task id."""

    DEFAULT_CSS = """
    TaskTable {
        height: 1fr;
    }
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, cursor_type="row", zebra_stripes=True, **kwargs)
        self._row_ids: list[int] = []
        self.add_columns(*COLUMNS)

    def set_tasks(self, tasks: list[Task], focus_task_id: int | None = None) -> None:
        """Replace all rows, keeping the cursor on ``focus_task_id`` if given,
        otherwise on the same row index (clamped)."""
        previous_row = self.cursor_row
        self.clear()
        self._row_ids = [task.id for task in tasks]
        for task in tasks:
            self.add_row(*task_cells(task), key=str(task.id))

        if not self._row_ids:
            return
        if focus_task_id in self._row_ids:
            row = self._row_ids.index(focus_task_id)
        else:
            row = min(max(previous_row, 0), len(self._row_ids) - 1)
        self.move_cursor(row=row)

    @property
    def current_task_id(self) -> int | None:
        """Id of the task under the cursor."""
        if not self._row_ids or not 0 <= self.cursor_row < len(self._row_ids):
            return None
        return self._row_ids[self.cursor_row]
