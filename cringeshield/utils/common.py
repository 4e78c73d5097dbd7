"""
Common utility functions used across multiple routes and services.
"""

from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    """Naive UTC timestamp (the database stores naive UTC datetimes)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def iso_format(dt: Optional[datetime]) -> Optional[str]:
    """Format datetime as ISO string with Z suffix."""
    if dt is None:
        return None
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt.isoformat() + "Z"


def as_naive_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


def is_strict_int(value: object) -> bool:
    """True for real ints; bools are rejected even though they subclass int."""
    return isinstance(value, int) and not isinstance(value, bool)
