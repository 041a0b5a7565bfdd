"""Date and time utilities."""

import math
from datetime import datetime, timezone
from typing import Optional

MS_PER_DAY = 24 * 3600 * 1000

INVALID_WEEK_KEY = "invalid"


def parse_iso(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp into an aware UTC datetime.

    Date-only and naive values are read as UTC. Returns None when the
    value is missing or cannot be parsed.
    """
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    if text.endswith(('Z', 'z')):
        text = text[:-1] + '+00:00'

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)


def days_between(a_iso: Optional[str], b_iso: Optional[str]) -> float:
    """Whole days from a to b, never negative. nan if either side is malformed."""
    a = parse_iso(a_iso)
    b = parse_iso(b_iso)
    if a is None or b is None:
        return math.nan

    elapsed_ms = (b - a).total_seconds() * 1000
    return max(0, round_half_up(elapsed_ms / MS_PER_DAY))


def iso_week_number(dt: datetime) -> int:
    """ISO-8601 week number; week 1 holds the year's first Thursday."""
    # isocalendar() shifts to the Thursday of the Monday-based week
    return dt.isocalendar()[1]


def week_key(iso: Optional[str]) -> str:
    """Bucket key '<UTC year>-W<ISO week>' for a timestamp.

    The year is the calendar year, so 2018-12-31 maps to '2018-W1'.
    """
    dt = parse_iso(iso)
    if dt is None:
        return INVALID_WEEK_KEY
    return f"{dt.year}-W{iso_week_number(dt)}"
