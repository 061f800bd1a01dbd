"""Main task list screen."""

from rich.text import Text
from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from ...models import Task, View
from ...services import TaskListController
from ..widgets.search_bar import SearchBar
from ..widgets.task_table import TaskTable

EMPTY_MESSAGES = {
    View.PENDING: "No tasks found. Add a new task to get started!",
    View.COMPLETED: "No tasks found. Complete some tasks to see them here.",
}

VIEW_TITLES = {
    View.PENDING: "Todos",
    View.COMPLETED: "Completed",
}


def search_status(term: str) -> Text:
    # The term is user input, keep it out of markup
    return Text.assemble(("Search: ", "dim"), term, (" (Esc to clear)", "dim"))


class TaskListScreen(Screen):
    """Filtered task table with view tabs and a search bar."""

    DEFAULT_CSS = """
    TaskListScreen #view-tabs {
        height: 1;
        padding: 0 1;
        background: $boost;
    }

    TaskListScreen #search-status {
        height: 1;
        padding: 0 1;
        display: none;
    }

    TaskListScreen #empty-message {
        width: 100%;
        padding: 2 0;
        text-align: center;
        color: $text-muted;
    }
    """

    @property
    def controller(self) -> TaskListController:
        return self.app.controller  # pyrefly: ignore[missing-attribute]

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static("", id="view-tabs")
        yield Static("", id="search-status")
        yield TaskTable(id="task-table")
        yield Static("", id="empty-message")
        yield SearchBar()
        yield Footer()

    def on_mount(self) -> None:
        self.refresh_list()
        self.query_one(TaskTable).focus()

    def refresh_list(self, focus_task_id: int | None = None) -> None:
        """Re-render the table from the controller's filtered view."""
        view = self.controller.active_view
        tasks = list(self.controller.filtered_view())

        self.query_one(TaskTable).set_tasks(tasks, focus_task_id)

        empty = self.query_one("#empty-message", Static)
        empty.update(EMPTY_MESSAGES[view])
        empty.display = not tasks

        self._update_tabs(view)
        self._update_search_status(self.controller.search_term)

    def get_current_task(self) -> Task | None:
        """Get the task under the cursor."""
        task_id = self.query_one(TaskTable).current_task_id
        if task_id is None:
            return None
        return self.controller.get(task_id)

    def _update_tabs(self, active: View) -> None:
        labels = []
        for view, title in VIEW_TITLES.items():
            count = len(self.controller.filtered_view("", view))
            label = f"{title} ({count})"
            labels.append(f"[b reverse] {label} [/]" if view is active else f" {label} ")
        labels.append("[dim](tab to switch)[/]")
        self.query_one("#view-tabs", Static).update("  ".join(labels))

    def _update_search_status(self, term: str) -> None:
        status = self.query_one("#search-status", Static)
        if term:
            status.update(search_status(term))
            status.display = True
        else:
            status.update("")
            status.display = False
