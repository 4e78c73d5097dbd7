"""
Which weeks of the 15-week challenge a user may currently act on.

Two rules exist:

- time: week ``w`` unlocks once ``days_since_start >= (w - 1) * 7``.
- completion: week ``w`` unlocks once, for at least one tier, every prompt
  of week ``w - 1`` is in the completion set.

``is_week_unlocked`` applies the completion rule when a completion set is
passed and the time rule otherwise. Callers choose the authoritative rule
with ``UnlockMode`` (configured by ``WEEKLY_UNLOCK_MODE``) and never mix them.
The 30-day challenge has no unlock rule: every day is always selectable.
"""

from collections.abc import Iterable
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional

from cringeshield.catalog.weekly_prompts import (
    ALL_WEEKLY_PROMPTS,
    TOTAL_WEEKS,
    WeeklyChallengeTier,
    is_valid_week,
)
from cringeshield.errors import ValidationError
from cringeshield.utils.common import as_naive_utc, utcnow

DAYS_PER_WEEK = 7


class UnlockMode(str, Enum):
    TIME = "time"
    COMPLETION = "completion"


def resolve_unlock_mode(value: str | UnlockMode | None) -> UnlockMode:
    if isinstance(value, UnlockMode):
        return value
    try:
        return UnlockMode((value or UnlockMode.TIME.value).strip().lower())
    except ValueError:
        raise ValidationError(f"Unknown unlock mode: {value!r}") from None


def days_since_start(start_date: datetime, now: Optional[datetime] = None) -> int:
    """Whole days elapsed since ``start_date`` (floored)."""
    now = now if now is not None else utcnow()
    return (as_naive_utc(now) - as_naive_utc(start_date)) // timedelta(days=1)


def current_week(start_date: datetime, now: Optional[datetime] = None) -> int:
    """1-based week the user is in by elapsed time, capped at the final week."""
    days = max(days_since_start(start_date, now), 0)
    return min(days // DAYS_PER_WEEK + 1, TOTAL_WEEKS)


def _previous_week_complete(week_number: int, completed: set[str]) -> bool:
    previous = [p for p in ALL_WEEKLY_PROMPTS if p.week == week_number - 1]
    by_tier: dict[WeeklyChallengeTier, list[str]] = {}
    for p in previous:
        by_tier.setdefault(p.tier, []).append(p.id)
    return any(all(pid in completed for pid in ids) for ids in by_tier.values())


def is_week_unlocked(
    start_date: datetime,
    week_number: int,
    completed_prompts: Optional[Iterable[str]] = None,
    now: Optional[datetime] = None,
) -> bool:
    if not is_valid_week(week_number):
        raise ValidationError(f"Week number must be an integer between 1 and {TOTAL_WEEKS}")
    if week_number == 1:
        return True
    if completed_prompts is None:
        return days_since_start(start_date, now) >= (week_number - 1) * DAYS_PER_WEEK
    return _previous_week_complete(week_number, set(completed_prompts))


def unlocked_weeks(
    start_date: datetime,
    completed_prompts: Iterable[str] = (),
    mode: UnlockMode | str = UnlockMode.TIME,
    now: Optional[datetime] = None,
) -> list[int]:
    """Week numbers currently unlocked under the given mode."""
    completed = set(completed_prompts) if resolve_unlock_mode(mode) is UnlockMode.COMPLETION else None
    return [w for w in range(1, TOTAL_WEEKS + 1) if is_week_unlocked(start_date, w, completed, now)]
