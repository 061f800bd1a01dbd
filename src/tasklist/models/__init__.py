"""Data models."""

from .enums import View
from .form import CLOSED, CREATING, Closed, Creating, Draft, Editing, FormState
from .task import Task

__all__ = [
    "CLOSED",
    "CREATING",
    "Closed",
    "Creating",
    "Draft",
    "Editing",
    "FormState",
    "Task",
    "View",
]
