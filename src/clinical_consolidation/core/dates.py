# ============================================================================
# src/clinical_consolidation/core/dates.py
# ============================================================================
"""
Date helpers shared by the sorters and the grouping step.

Records carry ISO 8601 strings as produced by the clinical backend, e.g.
"2024-01-15T10:00:00Z", "2023-12-01T10:30:00.000+0000" or
"2024-01-01 10:00:00". Unparseable input yields None rather than raising.
"""

import re
from datetime import date, datetime
from typing import Optional, Union

DateLike = Union[str, date, datetime, None]

# "+0000" style offsets; fromisoformat wants "+00:00" on older interpreters
_COMPACT_OFFSET = re.compile(r"([+-]\d{2})(\d{2})$")


def parse_datetime(value: DateLike) -> Optional[datetime]:
    """Parse an ISO 8601 date or datetime, returning None when impossible."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)

    text = str(value).strip()
    if not text:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    text = _COMPACT_OFFSET.sub(r"\1:\2", text)

    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass

    # Fall back to the calendar day prefix, e.g. odd fractional seconds
    try:
        return datetime.fromisoformat(text[:10])
    except ValueError:
        return None


def to_date(value: DateLike) -> Optional[date]:
    """Calendar day of a date-like value, as written (no timezone shift)."""
    parsed = parse_datetime(value)
    return parsed.date() if parsed else None


def to_date_key(value: DateLike) -> str:
    """
    Day key in YYYY-MM-DD form.

    Unparseable strings are returned unchanged so they still form a
    group of their own instead of disappearing.
    """
    day = to_date(value)
    if day is None:
        return "" if value is None else str(value)
    return day.isoformat()


def sort_timestamp(value: DateLike) -> float:
    """
    Comparable number for a date-like value; unparseable values map to -inf.

    Naive and aware datetimes are both reduced to a POSIX-like number so
    mixed inputs never raise on comparison.
    """
    parsed = parse_datetime(value)
    if parsed is None:
        return float("-inf")
    if parsed.tzinfo is None:
        return (parsed - datetime(1970, 1, 1)).total_seconds()
    return parsed.timestamp()
