"""Date parsing utilities."""

from datetime import datetime, time, timedelta, UTC
from dateutil import parser as date_parser

RELATIVE_DAYS = {
    "today": 0,
    "yesterday": -1,
    "tomorrow": 1,
}


def parse_datetime(date_str: str) -> datetime:
    """Parse a date string into an aware UTC datetime.

    Supports:
    - Absolute dates and times: "2024-01-15", "2024-01-15 09:30",
      "January 15, 2024", "2024-01-15T10:00:00+02:00"
    - Relative days: "today", "yesterday", "tomorrow" (midnight UTC)

    Values without a timezone are taken as UTC.

    Args:
        date_str: Date string in various formats

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        ValueError: If date string cannot be parsed
    """
    text = date_str.strip().lower()
    if not text:
        raise ValueError("Empty date string")

    if text in RELATIVE_DAYS:
        day = datetime.now(UTC).date() + timedelta(days=RELATIVE_DAYS[text])
        return datetime.combine(day, time.min, tzinfo=UTC)

    try:
        parsed = date_parser.parse(date_str.strip())
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)
