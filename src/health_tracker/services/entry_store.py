"""
Entry store for bloodwork records.

Holds the ordered collection of health records in memory, mirrors the whole
collection to a storage slot on every append, and answers simple
per-category queries.
"""

import logging

from pydantic import TypeAdapter
from pydantic import ValidationError as SchemaError
from pydantic_core import PydanticSerializationError

from health_tracker.domain.records import HealthRecord
from health_tracker.infrastructure.storage.base import KeyValueStorage
from health_tracker.services.observable import Observable
from health_tracker.utils.exceptions import StorageError

logger = logging.getLogger(__name__)

_RECORDS_ADAPTER = TypeAdapter(list[HealthRecord])

Snapshot = tuple[HealthRecord, ...]


class EntryStore(Observable[Snapshot]):
    """
    Append-only store of health records.

    The store is the single writer of its slot. Insertion order is kept;
    records are never sorted, edited or removed.
    """

    def __init__(self, storage: KeyValueStorage, key: str = "bloodworkEntries") -> None:
        """
        Initialize entry store and load any persisted records.

        Args:
            storage: Storage backend holding the slot.
            key: Slot name for the serialized collection.
        """
        super().__init__()
        self.storage = storage
        self.key = key
        self._records: list[HealthRecord] = []
        self.load()

    @property
    def entries(self) -> Snapshot:
        """Current records in insertion order."""
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def load(self) -> None:
        """
        Load records from storage.

        A missing slot or undecodable contents leave the store empty.
        """
        self._records = []

        try:
            raw = self.storage.read(self.key)
        except StorageError as e:
            logger.warning(f"Could not read entries, starting empty: {e}")
            return

        if raw is None:
            logger.debug(f"No persisted entries under {self.key}")
            return

        try:
            self._records = _RECORDS_ADAPTER.validate_json(raw)
        except SchemaError as e:
            logger.warning(f"Discarding undecodable entries under {self.key}: {e}")
            return

        logger.info(f"Loaded {len(self._records)} entries")

    def append(self, record: HealthRecord) -> None:
        """
        Add a record at the end of the collection and persist.

        The caller is responsible for validating the record's fields.

        Args:
            record: Record to add.
        """
        self._records.append(record)
        self.persist()
        self._notify(self.entries)

    def persist(self) -> None:
        """Overwrite the slot with the full collection. Failures are logged, not raised."""
        try:
            data = _RECORDS_ADAPTER.dump_json(self._records, by_alias=True)
            self.storage.write(self.key, data)
        except (PydanticSerializationError, StorageError) as e:
            logger.error(f"Failed to persist {len(self._records)} entries: {e}")

    def average_value(self, category: str) -> float | None:
        """
        Mean value of the records in a category.

        Categories match by exact, case-sensitive string equality.

        Args:
            category: Category to average.

        Returns:
            Arithmetic mean, or None when no record matches.
        """
        values = [r.value for r in self._records if r.category == category]
        if not values:
            return None
        return sum(values) / len(values)

    def categories(self) -> list[str]:
        """Distinct categories in order of first appearance."""
        return list(dict.fromkeys(r.category for r in self._records))

    def trend(self, category: str) -> list[HealthRecord]:
        """
        Records of a category ordered by date.

        Records sharing a date keep their insertion order.

        Args:
            category: Category to list.

        Returns:
            Matching records sorted by date.
        """
        return sorted(
            (r for r in self._records if r.category == category),
            key=lambda r: r.date,
        )
