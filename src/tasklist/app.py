"""tasklist TUI Application."""

from rich.text import Text
from textual.app import App
from textual.binding import Binding
from textual.screen import ModalScreen
from textual.widgets import DataTable, Input

from .cli.output import error
from .config import Settings, build_storage
from .models import Draft, Editing
from .repositories import KeyValueTaskRepository
from .services import TaskListController
from .ui.screens.task_list import TaskListScreen
from .ui.widgets import ConfirmModal, SearchBar, TaskFormModal


class TasklistApp(App):
    """tasklist - terminal task list."""

    TITLE = "My Tasks"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("n", "new_task", "Add", show=True),
        Binding("e", "edit_task", "Edit", show=True),
        Binding("d", "delete_task", "Delete", show=True),
        Binding("space", "toggle_complete", "Done/Undo", show=True),
        Binding("tab", "switch_view", "Switch view", show=False, priority=True),
        Binding("/", "enter_search", "Search", show=True),
        Binding("s", "sync", "Retry sync", show=False),
        Binding("r", "reload", "Reload", show=False),
        Binding("escape", "escape", "Back", show=False, priority=True),
    ]

    SCREENS = {
        "tasks": TaskListScreen,
    }

    def __init__(
        self,
        settings: Settings | None = None,
        controller: TaskListController | None = None,
    ) -> None:
        super().__init__()
        self.settings = settings or Settings()
        self.storage = None
        if controller is None:
            self.storage = build_storage(self.settings)
            repository = KeyValueTaskRepository(self.storage, self.settings.namespace)
            controller = TaskListController(repository)
        self.controller = controller

    def on_mount(self) -> None:
        """Load tasks, then show the list."""
        self.controller.initialize()
        self.push_screen("tasks")

    def on_unmount(self) -> None:
        close = getattr(self.storage, "close", None)
        if close is not None:
            close()

    def _task_screen(self) -> TaskListScreen | None:
        screen = self.screen
        return screen if isinstance(screen, TaskListScreen) else None

    def _after_mutation(self, screen: TaskListScreen, focus_task_id: int | None = None) -> None:
        """Re-render and warn if the last change didn't reach storage."""
        screen.refresh_list(focus_task_id)
        if self.controller.has_unsynced:
            self.notify(
                "Some changes were not saved. Press s to retry.",
                severity="warning",
                timeout=4,
            )

    # Form actions
    def action_new_task(self) -> None:
        """Open the form for a new task."""
        if self._task_screen() is None:
            return
        self.controller.open_create()
        self.push_screen(  # pyrefly: ignore[no-matching-overload]
            TaskFormModal(self.controller.draft),
            callback=self._handle_form_result,
        )

    def action_edit_task(self) -> None:
        """Open the form on the task under the cursor."""
        screen = self._task_screen()
        if screen is None:
            return
        task = screen.get_current_task()
        if task is None or not self.controller.open_edit(task.id):
            return
        self.push_screen(  # pyrefly: ignore[no-matching-overload]
            TaskFormModal(self.controller.draft, editing=True),
            callback=self._handle_form_result,
        )

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        """Enter on a row edits it."""
        self.action_edit_task()

    def _handle_form_result(self, draft: Draft | None) -> None:
        """Submit or cancel the open form."""
        if draft is None:
            self.controller.cancel_form()
            return

        editing = isinstance(self.controller.form, Editing)
        self.controller.draft = draft
        task = self.controller.submit_form()

        screen = self._task_screen()
        if screen is None or task is None:
            return
        self._after_mutation(screen, focus_task_id=task.id)
        self.notify("Task updated" if editing else "Task added", timeout=2)

    # Task actions
    def action_delete_task(self) -> None:
        """Delete the task under the cursor (with confirmation)."""
        screen = self._task_screen()
        if screen is None:
            return
        task = screen.get_current_task()
        if task is None:
            return

        def handle_confirm(confirmed: bool | None) -> None:
            if not confirmed:
                return
            self.controller.remove(task.id)
            self._after_mutation(screen)
            self.notify("Task deleted", timeout=2)

        self.push_screen(  # pyrefly: ignore[no-matching-overload]
            ConfirmModal(Text.assemble("Delete '", task.title, "'?")),
            callback=handle_confirm,
        )

    def action_toggle_complete(self) -> None:
        """Mark the task under the cursor done, or not done."""
        screen = self._task_screen()
        if screen is None:
            return
        task = screen.get_current_task()
        if task is None:
            return

        toggled = self.controller.toggle_complete(task.id)
        if toggled is None:
            return
        # The task leaves the current view, so the cursor stays on its row index
        self._after_mutation(screen)
        self.notify(
            "Marked as complete" if toggled.completed else "Marked as incomplete",
            timeout=2,
        )

    def action_switch_view(self) -> None:
        """Switch between the pending and completed views."""
        screen = self._task_screen()
        if screen is None:
            # Keep tab as focus navigation inside modals
            self.screen.focus_next()
            return
        self.controller.set_view(self.controller.active_view.other())
        screen.refresh_list()

    def action_reload(self) -> None:
        """Reload every task from storage."""
        screen = self._task_screen()
        if screen is None:
            return
        self.controller.initialize()
        screen.refresh_list()
        self.notify("Reloaded", timeout=2)

    def action_sync(self) -> None:
        """Retry writes that failed earlier."""
        if not self.controller.has_unsynced:
            self.notify("Everything is saved", timeout=2)
            return
        failed = self.controller.sync_pending()
        if failed:
            self.notify(f"{len(failed)} tasks still not saved", severity="error", timeout=4)
        else:
            self.notify("All changes saved", timeout=2)

    # Search actions
    def action_enter_search(self) -> None:
        """Open the search bar."""
        screen = self._task_screen()
        if screen is None:
            return
        screen.query_one(SearchBar).enter_search_mode()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Search as you type."""
        if event.input.id != "search-input":
            return
        screen = self._task_screen()
        if screen is None:
            return
        screen.query_one(SearchBar).apply_search(event.value)
        self.controller.set_search_term(event.value)
        screen.refresh_list()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Enter in the search bar returns to the table."""
        if event.input.id != "search-input":
            return
        screen = self._task_screen()
        if screen is None:
            return
        screen.query_one(SearchBar).exit_search_mode()
        screen.query_one("#task-table").focus()

    def action_escape(self) -> None:
        """Handle escape: dismiss modal, leave search bar, or clear search."""
        screen = self.screen

        # If we're on a modal screen, dismiss it
        if isinstance(screen, ModalScreen):
            screen.dismiss(None)
            return

        if not isinstance(screen, TaskListScreen):
            return

        search_bar = screen.query_one(SearchBar)
        if search_bar.is_visible:
            search_bar.exit_search_mode()
            screen.query_one("#task-table").focus()
        elif search_bar.active_search:
            search_bar.clear_search()
            self.controller.set_search_term("")
            screen.refresh_list()


def run(settings: Settings | None = None) -> None:
    """Run the tasklist application."""
    try:
        app = TasklistApp(settings)
    except ValueError as e:
        error(str(e))
        raise SystemExit(1) from e
    app.run()
