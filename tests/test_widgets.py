"""Tests for rendering user text in the UI."""

from rich.text import Text

from tasklist.models import Task
from tasklist.ui.screens.task_list import search_status
from tasklist.ui.widgets.task_table import task_cells


class TestTaskCells:
    """Tests for the table row cells."""

    def test_bracketed_text_is_not_markup(self):
        task = Task(id=7, title="[/i] title", description="see [/b] later")

        task_id, title, description, date = task_cells(task)

        assert task_id == "7"
        assert isinstance(description, Text)
        assert description.plain == "see [/b] later"
        assert title.plain == "[/i] title"
        assert date.plain == task.date_created

    def test_completed_title_is_struck(self):
        _, title, _, _ = task_cells(Task(id=1, title="Done", completed=True))
        assert title.style == "strike dim"

    def test_pending_title_is_bold(self):
        _, title, _, _ = task_cells(Task(id=1, title="Open"))
        assert title.style == "bold"


class TestSearchStatus:
    """Tests for the search status line."""

    def test_term_shown_literally(self):
        status = search_status("[/i]")

        assert isinstance(status, Text)
        assert status.plain == "Search: [/i] (Esc to clear)"

    def test_term_keeps_markup_like_text(self):
        assert "[dim]x[/dim]" in search_status("[dim]x[/dim]").plain
