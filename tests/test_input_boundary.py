"""Unit tests for entry input validation."""

from datetime import date

import pytest

from health_tracker.services.input_boundary import (
    can_submit,
    parse_record_input,
    parse_value,
)
from health_tracker.utils.exceptions import ValidationError
from health_tracker.utils.timezone_utils import today


def test_parse_record_input_valid() -> None:
    """Test building a record from form input."""
    record = parse_record_input("2024-01-01", "Cholesterol", "180", "mg/dL", "fasting")

    if record.date != date(2024, 1, 1):
        raise AssertionError(f"Expected 2024-01-01, got {record.date}")
    if record.category != "Cholesterol":
        raise AssertionError(f"Expected Cholesterol, got {record.category}")
    if record.value != 180.0:
        raise AssertionError(f"Expected 180.0, got {record.value}")
    if record.notes != "fasting":
        raise AssertionError(f"Expected notes 'fasting', got {record.notes}")


def test_parse_record_input_defaults() -> None:
    """Test default date and blank notes."""
    record = parse_record_input(None, "LDL", "99.5", "mg/dL", "   ", timezone="UTC")

    if record.date != today("UTC"):
        raise AssertionError(f"Expected today's date, got {record.date}")
    if record.notes is not None:
        raise AssertionError(f"Expected notes None, got {record.notes!r}")


def test_parse_record_input_keeps_category_verbatim() -> None:
    """Test that category text is not normalized."""
    record = parse_record_input("2024-01-01", " cholesterol ", "180", "mg/dL")

    if record.category != " cholesterol ":
        raise AssertionError(f"Expected verbatim category, got {record.category!r}")


def test_parse_record_input_rejects_missing_fields() -> None:
    """Test required field checks."""
    with pytest.raises(ValidationError):
        parse_record_input("2024-01-01", "  ", "180", "mg/dL")

    with pytest.raises(ValidationError):
        parse_record_input("2024-01-01", "Cholesterol", "180", "")

    with pytest.raises(ValidationError):
        parse_record_input("not a date", "Cholesterol", "180", "mg/dL")


def test_parse_value() -> None:
    """Test numeric parsing of the value field."""
    result = parse_value(" 5,4 ")
    if result != 5.4:
        raise AssertionError(f"Expected 5.4, got {result}")

    result = parse_value("1000.5")
    if result != 1000.5:
        raise AssertionError(f"Expected 1000.5, got {result}")

    for text in ("", "abc", "nan", "inf", "1,000", "12,345,678", "1.000,5", "1,000.5"):
        with pytest.raises(ValidationError):
            parse_value(text)


def test_can_submit() -> None:
    """Test availability of the add action."""
    if not can_submit("Cholesterol", "180", "mg/dL"):
        raise AssertionError("Expected valid input to be submittable")

    if can_submit("Cholesterol", "high", "mg/dL"):
        raise AssertionError("Expected non-numeric value to block submit")

    if can_submit("", "180", "mg/dL"):
        raise AssertionError("Expected empty test name to block submit")
