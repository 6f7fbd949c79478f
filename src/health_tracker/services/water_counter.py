"""
Water intake counter.

Keeps a single running total of water intake and mirrors it to a storage
slot after every change.
"""

import logging
import math
from typing import Annotated

from pydantic import Field, TypeAdapter
from pydantic import ValidationError as SchemaError
from pydantic_core import PydanticSerializationError

from health_tracker.domain.records import ResetNotice
from health_tracker.infrastructure.storage.base import KeyValueStorage
from health_tracker.services.observable import Observable
from health_tracker.utils.exceptions import StorageError, ValidationError
from health_tracker.utils.parameters import WaterConfig

logger = logging.getLogger(__name__)

_TOTAL_ADAPTER = TypeAdapter(Annotated[float, Field(allow_inf_nan=False)])


class WaterCounter(Observable[float]):
    """
    Running water intake total with add and reset.

    The total is never rotated automatically; it accumulates until reset.
    Call :meth:`load` when the counter is first shown.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        key: str = "totalWaterIntake",
        config: WaterConfig | None = None,
    ) -> None:
        """
        Initialize water counter with a zero total.

        Args:
            storage: Storage backend holding the slot.
            key: Slot name for the total.
            config: Water configuration (increment policy and unit).
        """
        super().__init__()
        self.storage = storage
        self.key = key
        self.config = config or WaterConfig()
        self._total = 0.0

    @property
    def total(self) -> float:
        """Current running total."""
        return self._total

    def format_total(self) -> str:
        """Render the total with one decimal and the configured unit."""
        return f"{self._total:.1f} {self.config.unit}"

    def load(self) -> None:
        """Load the persisted total. Missing or undecodable values leave it at zero."""
        try:
            raw = self.storage.read(self.key)
        except StorageError as e:
            logger.warning(f"Could not read water total: {e}")
            return

        if raw is None:
            return

        try:
            self._total = _TOTAL_ADAPTER.validate_json(raw)
        except SchemaError as e:
            logger.warning(f"Discarding undecodable water total under {self.key}: {e}")
            self._total = 0.0
            return

        logger.debug(f"Loaded water total {self._total}")

    def add(self, amount: float) -> float:
        """
        Add an amount to the running total and persist.

        Args:
            amount: Increment to add.

        Returns:
            The new total.

        Raises:
            ValidationError: If amount is not finite, if the new total would not
                be finite, or if ``reject_non_positive`` is enabled and amount <= 0.
        """
        if not math.isfinite(amount):
            raise ValidationError(f"Water increment must be finite, got {amount}")
        if self.config.reject_non_positive and amount <= 0:
            raise ValidationError(f"Water increment must be positive, got {amount}")

        new_total = self._total + amount
        if not math.isfinite(new_total):
            raise ValidationError(f"Water total would overflow adding {amount}")

        self._total = new_total
        self.persist()
        self._notify(self._total)
        return self._total

    def reset(self) -> ResetNotice:
        """
        Set the total to zero and persist.

        Returns:
            Confirmation to present once to the user.
        """
        self._total = 0.0
        self.persist()
        self._notify(self._total)
        logger.info("Water intake reset")
        return ResetNotice()

    def persist(self) -> None:
        """Write the total to its slot. Failures are logged, not raised."""
        try:
            self.storage.write(self.key, _TOTAL_ADAPTER.dump_json(self._total))
        except (PydanticSerializationError, StorageError) as e:
            logger.error(f"Failed to persist water total: {e}")
