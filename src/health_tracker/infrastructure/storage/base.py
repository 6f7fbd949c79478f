"""Abstract interface for the persisted value store."""

from abc import ABC, abstractmethod


class KeyValueStorage(ABC):
    """
    Flat store of named slots, each holding one serialized value.

    Writes overwrite the whole slot. There is no partial write, listing,
    or transaction support.
    """

    @abstractmethod
    def read(self, key: str) -> bytes | None:
        """Return the bytes stored under ``key``, or None if the slot is empty."""
        ...

    @abstractmethod
    def write(self, key: str, data: bytes) -> None:
        """Overwrite the slot ``key`` with ``data``."""
        ...
