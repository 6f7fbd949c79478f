"""Unit tests for storage backends."""

from pathlib import Path

import pytest

from health_tracker.cli.main import create_storage
from health_tracker.infrastructure.storage.file_storage import FileStorage
from health_tracker.infrastructure.storage.memory_storage import InMemoryStorage
from health_tracker.utils.exceptions import StorageError
from health_tracker.utils.parameters import StorageConfig


def test_file_storage_round_trip(tmp_path: Path) -> None:
    """Test writing and reading a slot from disk."""
    storage = FileStorage(tmp_path / "data")

    if storage.read("bloodworkEntries") is not None:
        raise AssertionError("Expected empty slot before first write")

    storage.write("bloodworkEntries", b"[]")
    storage.write("bloodworkEntries", b'[{"a": 1}]')

    if storage.read("bloodworkEntries") != b'[{"a": 1}]':
        raise AssertionError("Expected last write to win")

    if not (tmp_path / "data" / "bloodworkEntries.json").exists():
        raise AssertionError("Expected slot file to be created")

    leftovers = list((tmp_path / "data").glob("*.tmp"))
    if leftovers:
        raise AssertionError(f"Expected no temporary files, got {leftovers}")


def test_file_storage_rejects_unsafe_keys(tmp_path: Path) -> None:
    """Test that keys cannot escape the data directory."""
    storage = FileStorage(tmp_path)

    for key in ("../outside", "a/b", "", ".."):
        with pytest.raises(StorageError):
            storage.write(key, b"1")


def test_memory_storage_is_isolated() -> None:
    """Test that separate memory stores do not share slots."""
    first = InMemoryStorage()
    second = InMemoryStorage()

    first.write("totalWaterIntake", b"250.0")

    if second.read("totalWaterIntake") is not None:
        raise AssertionError("Expected second store to be empty")


def test_create_storage_backends(tmp_path: Path) -> None:
    """Test the storage factory."""
    file_storage = create_storage(StorageConfig(backend="file", dir=str(tmp_path)))
    if not isinstance(file_storage, FileStorage):
        raise AssertionError(f"Expected FileStorage, got {type(file_storage)}")

    memory_storage = create_storage(StorageConfig(backend="memory"))
    if not isinstance(memory_storage, InMemoryStorage):
        raise AssertionError(f"Expected InMemoryStorage, got {type(memory_storage)}")


def test_file_storage_read_failure_raises_storage_error(tmp_path: Path) -> None:
    """Test that an unreadable slot is reported as a storage error."""
    (tmp_path / "bloodworkEntries.json").mkdir()
    storage = FileStorage(tmp_path)

    with pytest.raises(StorageError):
        storage.read("bloodworkEntries")


def test_file_storage_write_failure_cleans_up(tmp_path: Path) -> None:
    """Test that a failed replace raises and leaves no temporary file."""
    blocked = tmp_path / "totalWaterIntake.json"
    blocked.mkdir()
    (blocked / "keep").write_text("x", encoding="utf-8")
    storage = FileStorage(tmp_path)

    with pytest.raises(StorageError):
        storage.write("totalWaterIntake", b"250.0")

    if (tmp_path / "totalWaterIntake.json.tmp").exists():
        raise AssertionError("Expected the temporary file to be removed")


def test_file_storage_unusable_directory(tmp_path: Path) -> None:
    """Test writing when the data directory path is a regular file."""
    not_a_dir = tmp_path / "data"
    not_a_dir.write_text("", encoding="utf-8")
    storage = FileStorage(not_a_dir)

    with pytest.raises(StorageError):
        storage.write("bloodworkEntries", b"[]")
