"""Tests for filtering."""

import pytest

from tasklist.models import Task, View
from tasklist.services import Filter, FilteredView, FilterService


@pytest.fixture
def filter_service() -> FilterService:
    """Create a FilterService instance."""
    return FilterService()


@pytest.fixture
def tasks() -> list[Task]:
    return [
        Task(id=3, title="Buy Milk", description=""),
        Task(id=2, title="Fix bike", description="back tyre, buy a patch kit", completed=True),
        Task(id=1, title="Email Sam", description="about the milk rota"),
    ]


def ids(view) -> list[int]:
    return [task.id for task in view]


class TestFilterMatches:
    """Tests for Filter.matches."""

    def test_defaults(self):
        assert Filter() == Filter(text="", view=View.PENDING)

    def test_empty_text_matches_whole_view(self, tasks):
        assert ids(FilteredView(lambda: tasks, Filter())) == [3, 1]

    def test_completed_view(self, tasks):
        assert ids(FilteredView(lambda: tasks, Filter(view=View.COMPLETED))) == [2]

    def test_text_matches_title_or_description(self, tasks):
        assert ids(FilteredView(lambda: tasks, Filter(text="MILK"))) == [3, 1]

    def test_text_and_view_combined(self, tasks):
        assert Filter(text="buy", view=View.COMPLETED).matches(tasks[1])
        assert not Filter(text="buy").matches(tasks[1])
        assert Filter(text="buy").matches(tasks[0])

    def test_no_matches(self, tasks):
        assert not any(Filter(text="zebra").matches(task) for task in tasks)

    def test_surrounding_spaces_are_part_of_term(self, tasks):
        assert ids(FilteredView(lambda: tasks, Filter(text="milk "))) == [1]

    def test_brackets_are_plain_text(self):
        task = Task(id=1, title="Read [/b] notes")
        assert Filter(text="[/b]").matches(task)


class TestFilteredView:
    """Tests for the lazy view."""

    def test_source_not_read_until_iterated(self, filter_service: FilterService, tasks):
        calls = []

        def source():
            calls.append(1)
            return tasks

        view = filter_service.view(source, Filter())
        assert calls == []

        assert ids(view) == [3, 1]
        assert calls == [1]

    def test_iterates_repeatedly(self, tasks):
        view = FilteredView(lambda: tasks, Filter(text="milk"))

        assert list(view) == list(view) == [tasks[0], tasks[2]]

    def test_reflects_source_changes(self, tasks):
        current = list(tasks)
        view = FilteredView(lambda: current, Filter())
        assert ids(view) == [3, 1]

        current.pop(0)
        assert ids(view) == [1]

    def test_len_and_bool(self, tasks):
        assert len(FilteredView(lambda: tasks, Filter())) == 2
        assert FilteredView(lambda: tasks, Filter())
        assert not FilteredView(lambda: [], Filter())
