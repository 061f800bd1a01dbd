"""Widget components."""

from .confirm_modal import ConfirmModal
from .search_bar import SearchBar
from .task_form_modal import TaskFormModal
from .task_table import TaskTable

__all__ = [
    "ConfirmModal",
    "SearchBar",
    "TaskFormModal",
    "TaskTable",
]
