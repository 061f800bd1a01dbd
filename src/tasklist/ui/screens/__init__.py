"""Screen components."""

from .task_list import TaskListScreen

__all__ = [
    "TaskListScreen",
]
