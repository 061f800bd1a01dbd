"""Directory-backed key-value storage."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from urllib.parse import quote, unquote

from .errors import StorageError

logger = logging.getLogger(__name__)


class DirectoryStorage:
    """
    Storage keeping one file per key in a directory.

    File names are the percent-encoded key (``todo:17`` becomes
    ``todo%3A17``), so any key maps to a single flat file.
    """

    SUFFIX = ".json"

    def __init__(self, root: Path) -> None:
        self.root = root

    def ensure_directory(self) -> None:
        """Create the storage directory if it doesn't exist."""
        self.root.mkdir(parents=True, exist_ok=True)

    def path_for(self, key: str) -> Path:
        return self.root / f"{quote(key, safe='')}{self.SUFFIX}"

    def list(self, prefix: str) -> list[str]:
        if not self.root.exists():
            return []
        try:
            return [key for key in self._iter_keys() if key.startswith(prefix)]
        except OSError as e:
            raise StorageError(f"Cannot list {self.root}: {e}") from e

    def get(self, key: str) -> str | None:
        filepath = self.path_for(key)
        try:
            return filepath.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Cannot read {filepath}: {e}") from e

    def set(self, key: str, value: str) -> None:
        filepath = self.path_for(key)
        tmp_path = filepath.with_name(filepath.name + ".tmp")
        try:
            self.ensure_directory()
            # Write then rename so a crash never leaves a half-written value
            tmp_path.write_text(value, encoding="utf-8")
            tmp_path.replace(filepath)
        except OSError as e:
            raise StorageError(f"Cannot write {filepath}: {e}") from e
        logger.debug("Wrote %s", filepath)

    def delete(self, key: str) -> None:
        filepath = self.path_for(key)
        try:
            filepath.unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot delete {filepath}: {e}") from e

    def _iter_keys(self) -> Iterator[str]:
        for filepath in self.root.glob(f"*{self.SUFFIX}"):
            yield unquote(filepath.name[: -len(self.SUFFIX)])
