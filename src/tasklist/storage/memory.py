"""In-process key-value storage."""


class MemoryStorage:
    """Dict-backed storage. Nothing survives the process."""

    def __init__(self, data: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(data or {})

    def list(self, prefix: str) -> list[str]:
        return [key for key in self.data if key.startswith(prefix)]

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def delete(self, key: str) -> None:
        self.data.pop(key, None)
