"""In-process storage backend."""

from health_tracker.infrastructure.storage.base import KeyValueStorage


class InMemoryStorage(KeyValueStorage):
    """Dict-backed storage; contents vanish with the process."""

    def __init__(self, initial: dict[str, bytes] | None = None) -> None:
        self.slots: dict[str, bytes] = dict(initial or {})

    def read(self, key: str) -> bytes | None:
        return self.slots.get(key)

    def write(self, key: str, data: bytes) -> None:
        self.slots[key] = bytes(data)
