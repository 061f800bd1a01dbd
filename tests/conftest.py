"""Shared fixtures and fakes."""

import pytest

from tasklist.repositories import KeyValueTaskRepository
from tasklist.services import TaskListController
from tasklist.storage import MemoryStorage, StorageError, StorageUnavailableError
from tasklist.utils import IdAllocator


class FlakyStorage(MemoryStorage):
    """MemoryStorage whose operations can be told to fail."""

    def __init__(self, data: dict[str, str] | None = None) -> None:
        super().__init__(data)
        self.fail_list = False
        self.fail_set = False
        self.fail_delete = False
        self.fail_get_keys: set[str] = set()

    def list(self, prefix: str) -> list[str]:
        if self.fail_list:
            raise StorageUnavailableError("storage offline")
        return super().list(prefix)

    def get(self, key: str) -> str | None:
        if key in self.fail_get_keys:
            raise StorageError(f"cannot read {key}")
        return super().get(key)

    def set(self, key: str, value: str) -> None:
        if self.fail_set:
            raise StorageError("write rejected")
        super().set(key, value)

    def delete(self, key: str) -> None:
        if self.fail_delete:
            raise StorageError("delete rejected")
        super().delete(key)


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, now: int = 1_700_000_000_000) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now


@pytest.fixture
def storage() -> FlakyStorage:
    """Empty storage that can be made to fail."""
    return FlakyStorage()


@pytest.fixture
def repo(storage: FlakyStorage) -> KeyValueTaskRepository:
    """Repository over the flaky storage."""
    return KeyValueTaskRepository(storage)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def controller(repo: KeyValueTaskRepository, clock: FakeClock) -> TaskListController:
    """Initialized controller with a frozen id clock and display timestamp."""
    ctrl = TaskListController(
        repo,
        id_allocator=IdAllocator(clock),
        clock=lambda: "October 19, 2026 at 09:03 AM",
    )
    ctrl.initialize()
    return ctrl
