"""Tests for KeyValueTaskRepository."""

import logging
from pathlib import Path

import pytest

from tasklist.models import Task
from tasklist.repositories import KeyValueTaskRepository
from tasklist.storage import DirectoryStorage


def make_task(task_id: int, title: str = "Task", **kwargs) -> Task:
    return Task(id=task_id, title=title, date_created="October 19, 2026 at 09:03 AM", **kwargs)


class TestKeyNaming:
    """Tests for the key naming scheme."""

    def test_default_namespace(self, repo: KeyValueTaskRepository):
        assert repo.prefix == "todo:"
        assert repo.key_for(1760864580000) == "todo:1760864580000"

    def test_custom_namespace(self, storage):
        repo = KeyValueTaskRepository(storage, namespace="work")
        assert repo.key_for(3) == "work:3"

    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("todo:42", 42),
            ("todo:", None),
            ("todo:abc", None),
            ("todo:-1", None),
            ("todo:1.5", None),
            ("note:42", None),
            ("todo:012", None),
            ("todo:0042", None),
            ("todo:١٢", None),
            ("todo:0", 0),
        ],
    )
    def test_id_from_key(self, repo: KeyValueTaskRepository, key: str, expected):
        assert repo.id_from_key(key) == expected


class TestListAll:
    """Tests for loading tasks."""

    def test_empty_storage(self, repo: KeyValueTaskRepository):
        assert repo.list_all() == []

    def test_orders_by_descending_id(self, repo: KeyValueTaskRepository):
        for task_id in (20, 300, 1):
            repo.save(make_task(task_id, f"Task {task_id}"))

        assert [t.id for t in repo.list_all()] == [300, 20, 1]

    def test_round_trip_through_storage(self, repo: KeyValueTaskRepository):
        task = make_task(7, "Write report", description="Q3 summary", completed=True)
        repo.save(task)

        assert repo.list_all() == [task]

    def test_drops_unparseable_entries(self, repo: KeyValueTaskRepository, storage):
        repo.save(make_task(1, "Good"))
        storage.data["todo:2"] = "{not json"
        storage.data["todo:3"] = '{"id": 3}'

        assert [t.title for t in repo.list_all()] == ["Good"]

    def test_drops_entries_that_fail_to_fetch(self, repo: KeyValueTaskRepository, storage):
        repo.save(make_task(1, "Readable"))
        repo.save(make_task(2, "Unreadable"))
        storage.fail_get_keys.add("todo:2")

        assert [t.title for t in repo.list_all()] == ["Readable"]

    def test_drops_entries_that_are_not_utf8(self, tmp_path: Path):
        storage = DirectoryStorage(tmp_path)
        repo = KeyValueTaskRepository(storage)
        repo.save(make_task(1, "Readable"))
        storage.path_for("todo:2").write_bytes(b"\xff\xfe")

        assert [t.id for t in repo.list_all()] == [1]

    def test_fetch_value_error_is_dropped(self, repo: KeyValueTaskRepository, storage):
        repo.save(make_task(1, "Readable"))
        repo.save(make_task(2, "Broken"))
        real_get = storage.get

        def get(key: str) -> str | None:
            if key == "todo:2":
                raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
            return real_get(key)

        storage.get = get

        assert [t.id for t in repo.list_all()] == [1]

    def test_skips_non_canonical_keys(self, repo: KeyValueTaskRepository, storage):
        storage.data["todo:012"] = make_task(12).to_json()

        assert repo.list_all() == []

    def test_skips_keys_outside_namespace(self, repo: KeyValueTaskRepository, storage):
        storage.data["todo:notes"] = make_task(9).to_json()
        storage.data["todos:9"] = make_task(9).to_json()

        assert repo.list_all() == []

    def test_drops_entry_whose_id_disagrees_with_key(self, repo: KeyValueTaskRepository, storage):
        storage.data["todo:5"] = make_task(6).to_json()

        assert repo.list_all() == []

    def test_storage_unavailable_yields_empty(self, repo: KeyValueTaskRepository, storage, caplog):
        repo.save(make_task(1))
        storage.fail_list = True

        with caplog.at_level(logging.WARNING, logger="tasklist"):
            assert repo.list_all() == []

        assert "Storage unavailable" in caplog.text


class TestSave:
    """Tests for saving tasks."""

    def test_writes_json_under_key(self, repo: KeyValueTaskRepository, storage):
        task = make_task(11, "Buy Milk")

        assert repo.save(task) is True
        assert Task.from_json(storage.data["todo:11"]) == task

    def test_overwrites_existing(self, repo: KeyValueTaskRepository, storage):
        repo.save(make_task(11, "Old"))
        repo.save(make_task(11, "New"))

        assert list(storage.data) == ["todo:11"]
        assert repo.list_all()[0].title == "New"

    def test_failure_returns_false_and_logs(self, repo: KeyValueTaskRepository, storage, caplog):
        storage.fail_set = True

        with caplog.at_level(logging.ERROR, logger="tasklist"):
            assert repo.save(make_task(11)) is False

        assert "Failed to save task todo:11" in caplog.text
        assert storage.data == {}


class TestRemove:
    """Tests for removing tasks."""

    def test_deletes_key(self, repo: KeyValueTaskRepository, storage):
        repo.save(make_task(11))

        assert repo.remove(11) is True
        assert storage.data == {}

    def test_missing_is_success(self, repo: KeyValueTaskRepository):
        assert repo.remove(404) is True

    def test_failure_returns_false_and_logs(self, repo: KeyValueTaskRepository, storage, caplog):
        repo.save(make_task(11))
        storage.fail_delete = True

        with caplog.at_level(logging.ERROR, logger="tasklist"):
            assert repo.remove(11) is False

        assert "Failed to delete task todo:11" in caplog.text
        assert "todo:11" in storage.data
