"""
Persistence for challenge progress and badges.

Uniqueness is enforced by the schema (see ``cringeshield.models.models``):
one day record per (user, day), one badge per (user, milestone) and per
(user, tier, week), one weekly enrollment per user, one completion per
(enrollment, prompt). Inserts that lose a race hit IntegrityError; the
session is rolled back and the row that won is returned instead.
"""

from typing import Callable, Optional, TypeVar

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session as DBSession

from cringeshield.models.models import (
    ChallengeBadge,
    ChallengeDayProgress,
    WeeklyBadge,
    WeeklyProgress,
    WeeklyPromptCompletion,
)
from cringeshield.utils.common import utcnow
from cringeshield.utils.logger import get_logger

logger = get_logger("progress_store")

T = TypeVar("T")


class ProgressStore:
    """Row-level access to the progress and badge tables, scoped by user id."""

    def __init__(self, db: DBSession):
        self.db = db

    def _insert_or_get(self, row: T, lookup: Callable[[], Optional[T]]) -> tuple[T, bool]:
        """Insert ``row``; on a uniqueness violation return the existing row."""
        self.db.add(row)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            existing = lookup()
            if existing is None:
                raise
            logger.debug("duplicate insert absorbed table=%s", getattr(row, "__tablename__", "?"))
            return existing, False
        self.db.refresh(row)
        return row, True

    # ----- 30-day challenge -----

    def list_days(self, user_id: int) -> list[ChallengeDayProgress]:
        return (
            self.db.query(ChallengeDayProgress)
            .filter(ChallengeDayProgress.user_id == user_id)
            .order_by(ChallengeDayProgress.day_number.asc())
            .all()
        )

    def get_day(self, user_id: int, day_number: int) -> Optional[ChallengeDayProgress]:
        return (
            self.db.query(ChallengeDayProgress)
            .filter(ChallengeDayProgress.user_id == user_id, ChallengeDayProgress.day_number == day_number)
            .first()
        )

    def count_days(self, user_id: int) -> int:
        return int(
            self.db.query(func.count(ChallengeDayProgress.id))
            .filter(ChallengeDayProgress.user_id == user_id)
            .scalar()
            or 0
        )

    def insert_day(self, user_id: int, day_number: int) -> tuple[ChallengeDayProgress, bool]:
        existing = self.get_day(user_id, day_number)
        if existing is not None:
            return existing, False
        row = ChallengeDayProgress(user_id=user_id, day_number=day_number, completed_at=utcnow())
        return self._insert_or_get(row, lambda: self.get_day(user_id, day_number))

    def list_challenge_badges(self, user_id: int) -> list[ChallengeBadge]:
        return (
            self.db.query(ChallengeBadge)
            .filter(ChallengeBadge.user_id == user_id)
            .order_by(ChallengeBadge.milestone.asc())
            .all()
        )

    def get_challenge_badge(self, user_id: int, milestone: int) -> Optional[ChallengeBadge]:
        return (
            self.db.query(ChallengeBadge)
            .filter(ChallengeBadge.user_id == user_id, ChallengeBadge.milestone == milestone)
            .first()
        )

    def insert_challenge_badge(self, user_id: int, milestone: int) -> tuple[ChallengeBadge, bool]:
        row = ChallengeBadge(user_id=user_id, milestone=milestone, earned_at=utcnow())
        return self._insert_or_get(row, lambda: self.get_challenge_badge(user_id, milestone))

    # ----- 15-week challenge -----

    def get_weekly_progress(self, user_id: int) -> Optional[WeeklyProgress]:
        return self.db.query(WeeklyProgress).filter(WeeklyProgress.user_id == user_id).first()

    def insert_weekly_progress(self, user_id: int, tier: str) -> tuple[WeeklyProgress, bool]:
        row = WeeklyProgress(user_id=user_id, selected_tier=tier, start_date=utcnow())
        return self._insert_or_get(row, lambda: self.get_weekly_progress(user_id))

    def get_weekly_completion(self, progress_id: int, prompt_id: str) -> Optional[WeeklyPromptCompletion]:
        return (
            self.db.query(WeeklyPromptCompletion)
            .filter(WeeklyPromptCompletion.progress_id == progress_id, WeeklyPromptCompletion.prompt_id == prompt_id)
            .first()
        )

    def add_weekly_completion(self, progress: WeeklyProgress, prompt_id: str) -> bool:
        """Add ``prompt_id`` to the completion set. Returns False if it was already there."""
        progress_id = progress.id
        if prompt_id in progress.completed_prompts:
            return False
        row = WeeklyPromptCompletion(progress_id=progress_id, prompt_id=prompt_id, completed_at=utcnow())
        _, created = self._insert_or_get(row, lambda: self.get_weekly_completion(progress_id, prompt_id))
        self.db.refresh(progress)
        return created

    def list_weekly_badges(self, user_id: int) -> list[WeeklyBadge]:
        return (
            self.db.query(WeeklyBadge)
            .filter(WeeklyBadge.user_id == user_id)
            .order_by(WeeklyBadge.tier.asc(), WeeklyBadge.week_number.asc())
            .all()
        )

    def get_weekly_badge(self, user_id: int, tier: str, week_number: int) -> Optional[WeeklyBadge]:
        return (
            self.db.query(WeeklyBadge)
            .filter(
                WeeklyBadge.user_id == user_id,
                WeeklyBadge.tier == tier,
                WeeklyBadge.week_number == week_number,
            )
            .first()
        )

    def insert_weekly_badge(self, user_id: int, tier: str, week_number: int) -> tuple[WeeklyBadge, bool]:
        row = WeeklyBadge(user_id=user_id, tier=tier, week_number=week_number, earned_at=utcnow())
        return self._insert_or_get(row, lambda: self.get_weekly_badge(user_id, tier, week_number))
