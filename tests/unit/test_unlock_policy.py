"""Unit tests for week unlocking (time and completion rules)."""
from datetime import datetime, timedelta, timezone

import pytest

from cringeshield.errors import ValidationError
from cringeshield.services.unlock_policy import (
    UnlockMode,
    current_week,
    days_since_start,
    is_week_unlocked,
    resolve_unlock_mode,
    unlocked_weeks,
)

START = datetime(2024, 1, 1)
SHY_WEEK_1 = ["shy_w1_p1", "shy_w1_p2", "shy_w1_p3"]


@pytest.mark.unit
class TestTimeRule:
    def test_one_week_after_start(self):
        now = datetime(2024, 1, 8)
        assert is_week_unlocked(START, 1, now=now)
        assert is_week_unlocked(START, 2, now=now)
        assert not is_week_unlocked(START, 3, now=now)

    def test_week_one_always_unlocked(self):
        assert is_week_unlocked(START, 1, now=START - timedelta(days=3))

    def test_partial_day_does_not_count(self):
        assert not is_week_unlocked(START, 2, now=datetime(2024, 1, 7, 23, 59))

    def test_aware_now(self):
        now = datetime(2024, 1, 8, tzinfo=timezone.utc)
        assert days_since_start(START, now) == 7

    @pytest.mark.parametrize("week", [0, 16, True, "2"])
    def test_invalid_week(self, week):
        with pytest.raises(ValidationError):
            is_week_unlocked(START, week, now=START)

    def test_current_week(self):
        assert current_week(START, START) == 1
        assert current_week(START, datetime(2024, 1, 15)) == 3
        assert current_week(START, datetime(2025, 1, 1)) == 15

    def test_unlocked_weeks(self):
        assert unlocked_weeks(START, now=datetime(2024, 1, 15)) == [1, 2, 3]


@pytest.mark.unit
class TestCompletionRule:
    def test_previous_week_complete_unlocks(self):
        assert is_week_unlocked(START, 2, SHY_WEEK_1, now=START)
        assert not is_week_unlocked(START, 3, SHY_WEEK_1, now=START)

    def test_partial_previous_week_stays_locked(self):
        assert not is_week_unlocked(START, 2, SHY_WEEK_1[:2], now=datetime(2024, 6, 1))

    def test_empty_set_locks_everything_but_week_one(self):
        assert unlocked_weeks(START, [], UnlockMode.COMPLETION, now=datetime(2024, 6, 1)) == [1]

    def test_mode_selects_rule(self):
        now = datetime(2024, 1, 8)
        assert unlocked_weeks(START, SHY_WEEK_1, "time", now=now) == [1, 2]
        assert unlocked_weeks(START, SHY_WEEK_1, "completion", now=now) == [1, 2]
        assert unlocked_weeks(START, [], "time", now=now) == [1, 2]


@pytest.mark.unit
class TestResolveMode:
    def test_defaults_to_time(self):
        assert resolve_unlock_mode(None) is UnlockMode.TIME

    def test_case_insensitive(self):
        assert resolve_unlock_mode(" Completion ") is UnlockMode.COMPLETION

    def test_unknown(self):
        with pytest.raises(ValidationError):
            resolve_unlock_mode("streak")
