"""
Validation of raw user input for new entries.

Everything typed by the user passes through here before reaching the
entry store, which performs no validation of its own.
"""

import math
import re

from health_tracker.domain.records import HealthRecord
from health_tracker.utils.exceptions import ValidationError
from health_tracker.utils.timezone_utils import parse_date

_GROUPED_PATTERN = re.compile(r"^[+-]?\d{1,3}(,\d{3})+$")


def parse_value(value_text: str) -> float:
    """
    Parse a measured value, accepting a comma decimal separator.

    Text with more than one separator, or a comma followed by exactly three
    digits as in ``1,000``, is rejected rather than read as a decimal.

    Args:
        value_text: Value as typed.

    Returns:
        Parsed finite float.

    Raises:
        ValidationError: If the text is not a finite number.
    """
    stripped = value_text.strip()

    if stripped.count(",") + stripped.count(".") > 1 or _GROUPED_PATTERN.match(stripped):
        raise ValidationError(f"Ambiguous number {value_text!r}, use a single decimal separator")

    cleaned = stripped.replace(",", ".")
    try:
        value = float(cleaned)
    except ValueError as e:
        raise ValidationError(f"Value must be a number, got {value_text!r}") from e

    if not math.isfinite(value):
        raise ValidationError(f"Value must be finite, got {value_text!r}")

    return value


def can_submit(category: str, value_text: str, unit: str) -> bool:
    """Whether the add action should be available for the current input."""
    if not category.strip() or not unit.strip():
        return False
    try:
        parse_value(value_text)
    except ValidationError:
        return False
    return True


def parse_record_input(
    date_text: str | None,
    category: str,
    value_text: str,
    unit: str,
    notes: str | None = None,
    timezone: str = "UTC",
) -> HealthRecord:
    """
    Build a health record from raw form input.

    Category and unit are stored exactly as given once they are known to be
    non-blank. Blank notes become None.

    Args:
        date_text: Date as typed; blank means today in ``timezone``.
        category: Test name.
        value_text: Measured value as typed.
        unit: Measurement unit.
        notes: Optional notes.
        timezone: Timezone used to resolve today.

    Returns:
        New health record with a fresh id.

    Raises:
        ValidationError: If any field is rejected.
    """
    if not category.strip():
        raise ValidationError("Test name is required")
    if not unit.strip():
        raise ValidationError("Unit is required")

    value = parse_value(value_text)
    entry_date = parse_date(date_text, timezone)

    return HealthRecord(
        date=entry_date,
        category=category,
        value=value,
        unit=unit,
        notes=notes if notes and notes.strip() else None,
    )
