"""Service layer for business logic."""

from .filter_service import Filter, FilteredView, FilterService
from .task_list import TaskListController

__all__ = [
    "Filter",
    "FilterService",
    "FilteredView",
    "TaskListController",
]
