"""Controller owning the in-memory task list."""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..models import CLOSED, CREATING, Creating, Draft, Editing, FormState, Task, View
from ..repositories import TaskRepositoryProtocol
from ..utils import IdAllocator, display_timestamp
from .filter_service import Filter, FilteredView, FilterService

logger = logging.getLogger(__name__)


class TaskListController:
    """
    Authoritative in-memory task list kept in step with a repository.

    Every mutation writes to the repository first and then applies the
    change in memory, whether or not the write succeeded. Failed writes are
    remembered in ``unsynced`` and retried by ``sync_pending()``; memory is
    never rolled back.
    """

    def __init__(
        self,
        repository: TaskRepositoryProtocol,
        id_allocator: IdAllocator | None = None,
        clock: Callable[[], str] = display_timestamp,
        filter_service: FilterService | None = None,
    ) -> None:
        self.repository = repository
        self._ids = id_allocator or IdAllocator()
        self._clock = clock
        self._filter_service = filter_service or FilterService()

        self.tasks: list[Task] = []
        self.search_term: str = ""
        self.active_view: View = View.PENDING
        self.draft: Draft = Draft()
        self.form: FormState = CLOSED
        self.unsynced: set[int] = set()

    # --- Loading ---

    def initialize(self) -> None:
        """Replace the in-memory list with what the repository holds."""
        self.tasks = self.repository.list_all()
        self._ids.seed(task.id for task in self.tasks)
        self.unsynced.clear()
        logger.info("Task list initialized with %d tasks", len(self.tasks))

    def get(self, task_id: int) -> Task | None:
        """Get a task by id."""
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    # --- Mutations ---

    def add(self, title: str, description: str = "") -> Task | None:
        """
        Create a task and put it at the top of the list.

        Returns None (and changes nothing) when the title is blank.
        """
        if not title.strip():
            return None

        task = Task(
            id=self._ids.next_id(),
            title=title,
            description=description,
            completed=False,
            date_created=self._clock(),
        )
        self._persist(task)
        self.tasks.insert(0, task)
        self._close_form()
        logger.info("Task added: %d", task.id)
        return task

    def update(self, target: Task | None, title: str, description: str) -> Task | None:
        """
        Replace a task's title and description, refreshing its timestamp.

        The task keeps its id, completion flag and list position. Returns
        None (and changes nothing) when the title is blank, there is no
        target, or the target has since been removed.
        """
        if target is None or not title.strip():
            return None
        current = self.get(target.id)
        if current is None:
            return None

        updated = current.with_content(title, description, self._clock())
        self._persist(updated)
        self._replace(updated)
        self._close_form()
        logger.info("Task updated: %d", updated.id)
        return updated

    def remove(self, task_id: int) -> None:
        """Delete a task from storage and from the list."""
        if self.repository.remove(task_id):
            self.unsynced.discard(task_id)
        else:
            self.unsynced.add(task_id)
        self.tasks = [task for task in self.tasks if task.id != task_id]
        if isinstance(self.form, Editing) and self.form.target.id == task_id:
            self._close_form()
        logger.info("Task removed: %d", task_id)

    def toggle_complete(self, task_id: int) -> Task | None:
        """Flip the completion flag of one task. Unknown ids are ignored."""
        task = self.get(task_id)
        if task is None:
            return None

        toggled = task.with_completed(not task.completed)
        self._persist(toggled)
        self._replace(toggled)
        logger.info("Task %d completed=%s", task_id, toggled.completed)
        return toggled

    # --- Filtering ---

    def set_search_term(self, term: str) -> None:
        self.search_term = term

    def set_view(self, view: View) -> None:
        self.active_view = view

    def filtered_view(
        self,
        search_term: str | None = None,
        active_view: View | None = None,
    ) -> FilteredView:
        """
        Tasks matching a search term in one view, in list order.

        Defaults to the controller's own search term and view. The result
        is lazy and re-evaluated on each iteration.
        """
        filter_ = Filter(
            text=self.search_term if search_term is None else search_term,
            view=self.active_view if active_view is None else View(active_view),
        )
        return self._filter_service.view(lambda: self.tasks, filter_)

    # --- Form ---

    def open_create(self) -> None:
        """Open the form for a new task."""
        self.draft = Draft()
        self.form = CREATING

    def open_edit(self, task_id: int) -> bool:
        """Open the form on an existing task. Returns False if it's gone."""
        task = self.get(task_id)
        if task is None:
            return False
        self.draft = Draft.from_task(task)
        self.form = Editing(task)
        return True

    def cancel_form(self) -> None:
        self._close_form()

    def submit_form(self) -> Task | None:
        """Create or update from the draft, depending on the open form."""
        match self.form:
            case Creating():
                return self.add(self.draft.title, self.draft.description)
            case Editing(target=target):
                return self.update(target, self.draft.title, self.draft.description)
            case _:
                return None

    @property
    def editing_target(self) -> Task | None:
        """Task being edited, if the edit form is open."""
        if isinstance(self.form, Editing):
            return self.form.target
        return None

    # --- Reconciliation ---

    @property
    def has_unsynced(self) -> bool:
        return bool(self.unsynced)

    def sync_pending(self) -> set[int]:
        """
        Retry every write that failed earlier.

        Tasks still in the list are saved again; ids no longer in the list
        are deleted again.

        Returns:
            Ids that still could not be written.
        """
        for task_id in sorted(self.unsynced):
            task = self.get(task_id)
            if task is not None:
                ok = self.repository.save(task)
            else:
                ok = self.repository.remove(task_id)
            if ok:
                self.unsynced.discard(task_id)

        if self.unsynced:
            logger.warning("%d tasks still unsynced", len(self.unsynced))
        return set(self.unsynced)

    # --- Private Methods ---

    def _persist(self, task: Task) -> None:
        if self.repository.save(task):
            self.unsynced.discard(task.id)
        else:
            self.unsynced.add(task.id)

    def _replace(self, updated: Task) -> None:
        self.tasks = [updated if task.id == updated.id else task for task in self.tasks]

    def _close_form(self) -> None:
        self.draft = Draft()
        self.form = CLOSED
