"""UI components."""

from .screens.task_list import TaskListScreen
from .widgets.task_table import TaskTable

__all__ = [
    "TaskListScreen",
    "TaskTable",
]
