"""
Health record domain models.

Defines the bloodwork entry schema as it is persisted, and the transient
notice produced when the water counter is reset.
"""

import datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class HealthRecord(BaseModel):
    """
    One manually entered health measurement.

    Persisted under the field names ``id``, ``date``, ``testName``, ``value``,
    ``unit`` and ``notes``. ``category`` and ``unit`` are expected to be non-empty;
    that is checked where user input is parsed, not here.
    """

    id: UUID = Field(default_factory=uuid4, description="Display identity, not a business key")
    date: datetime.date = Field(description="Calendar date of the observation")
    category: str = Field(alias="testName", description="Measured quantity, e.g. a test name")
    value: float = Field(allow_inf_nan=False, description="Measured value")
    unit: str = Field(description="Measurement unit")
    notes: str | None = Field(None, description="Optional annotation")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def describe(self) -> str:
        """Render the record as a single display line."""
        line = f"{self.date.isoformat()}  {self.category}: {self.value:g} {self.unit}"
        if self.notes:
            line += f"  (Notes: {self.notes})"
        return line


class ResetNotice(BaseModel):
    """One-time confirmation to show after the water total is reset."""

    title: str = "Water Intake Reset"
    message: str = "Your daily water intake has been reset."
