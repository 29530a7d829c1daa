"""
Zero Waste Chef Date Utilities
Helper functions for the loosely formatted timestamps stored as text
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a stored date or timestamp

    Accepts "YYYY-MM-DD", "YYYY-MM-DD HH:MM:SS" (SQLite CURRENT_TIMESTAMP)
    and ISO 8601 strings with an optional offset or trailing "Z".
    Naive values are taken to be UTC.

    Returns:
        Aware datetime, or None when the value is empty or unparseable
    """
    if not value or not isinstance(value, str):
        return None

    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def timestamp_or_epoch(value: Optional[str]) -> datetime:
    """Parse a creation timestamp, treating missing or bad values as the epoch"""
    return parse_timestamp(value) or EPOCH


def expires_within(expiration_date: Optional[str], days: int, now: Optional[datetime] = None) -> bool:
    """
    True when an expiration date falls before now + `days`

    Already-expired items count as expiring; unparseable dates never do.
    """
    expires_at = parse_timestamp(expiration_date)
    if expires_at is None:
        return False
    now = now or datetime.now(timezone.utc)
    return expires_at < now + timedelta(days=days)
