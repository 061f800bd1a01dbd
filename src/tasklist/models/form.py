"""Create/edit form state.

The form is in exactly one of three states. Holding a single ``FormState``
value (rather than a "creating" flag plus an optional edit target) makes it
impossible to be creating and editing at the same time.
"""

from dataclasses import dataclass

from .task import Task


@dataclass
class Draft:
    """Transient buffer behind the create/edit form."""

    title: str = ""
    description: str = ""

    @classmethod
    def from_task(cls, task: Task) -> "Draft":
        return cls(title=task.title, description=task.description)

    @property
    def is_blank(self) -> bool:
        """True when the title would be rejected on submit."""
        return not self.title.strip()


@dataclass(frozen=True)
class Closed:
    """No form is open."""


@dataclass(frozen=True)
class Creating:
    """The form is open for a new task."""


@dataclass(frozen=True)
class Editing:
    """The form is open for an existing task."""

    target: Task


FormState = Closed | Creating | Editing

CLOSED = Closed()
CREATING = Creating()
