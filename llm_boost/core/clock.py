"""Clock Helpers — timezone normalization for timestamps compared inside the core.

Invariants:
    - Naive datetimes are read as UTC (storage columns are `timestamp without time zone`)
    - Aware datetimes pass through unchanged
"""

from datetime import datetime, timezone


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
