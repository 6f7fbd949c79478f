"""
File-backed storage backend.

Each slot is stored as its own file inside a data directory, which plays
the role of the application's preferences store.
"""

import logging
import os
import re
from pathlib import Path

from health_tracker.infrastructure.storage.base import KeyValueStorage
from health_tracker.utils.exceptions import StorageError

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


class FileStorage(KeyValueStorage):
    """
    Storage backend keeping one ``<key>.json`` file per slot.

    Slots are replaced through a temporary file so that a reader never sees
    a half-written value.
    """

    def __init__(self, directory: str | Path) -> None:
        """
        Initialize file storage.

        Args:
            directory: Directory holding the slot files. Created on first write.
        """
        self.directory = Path(directory)

    def _slot_path(self, key: str) -> Path:
        """
        Resolve the file path for a slot.

        Args:
            key: Slot name.

        Returns:
            Path of the slot file.

        Raises:
            StorageError: If the key is not a plain file-safe name.
        """
        if not _KEY_PATTERN.match(key) or key in (".", ".."):
            raise StorageError(f"Invalid storage key: {key!r}")
        return self.directory / f"{key}.json"

    def read(self, key: str) -> bytes | None:
        path = self._slot_path(key)

        if not path.exists():
            logger.debug(f"Slot {key} is empty")
            return None

        try:
            return path.read_bytes()
        except OSError as e:
            raise StorageError(f"Failed to read slot {key} from {path}: {e}") from e

    def write(self, key: str, data: bytes) -> None:
        path = self._slot_path(key)
        tmp_path = path.with_suffix(".json.tmp")

        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            tmp_path.write_bytes(data)
            os.replace(tmp_path, path)
        except OSError as e:
            if tmp_path.exists():
                tmp_path.unlink()
            raise StorageError(f"Failed to write slot {key} to {path}: {e}") from e

        logger.debug(f"Wrote {len(data)} bytes to slot {key}")
