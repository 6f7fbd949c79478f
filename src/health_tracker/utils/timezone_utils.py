"""
Date utilities.

Entries carry a calendar date only; these helpers resolve "today" in the
configured timezone and parse user-typed dates.
"""

from datetime import date, datetime

import pytz
from dateutil import parser

from health_tracker.utils.exceptions import ValidationError


def today(timezone_str: str = "UTC") -> date:
    """
    Get the current calendar date in a timezone.

    Args:
        timezone_str: Timezone string (e.g., "America/Santiago").

    Returns:
        Today's date as seen in that timezone.
    """
    return datetime.now(pytz.timezone(timezone_str)).date()


def parse_date(date_str: str | None, timezone_str: str = "UTC") -> date:
    """
    Parse a date string into a calendar date.

    Any time-of-day component is dropped.

    Args:
        date_str: Date string (various formats supported). Blank or None means today.
        timezone_str: Timezone used to resolve today.

    Returns:
        Parsed date.

    Raises:
        ValidationError: If the string is not a recognizable date.
    """
    if date_str is None or not date_str.strip():
        return today(timezone_str)

    try:
        return parser.parse(date_str.strip()).date()
    except (ValueError, OverflowError) as e:
        raise ValidationError(f"Invalid date: {date_str!r}") from e
