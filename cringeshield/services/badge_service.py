"""
Badge awards with at-most-once semantics.

``check_and_award_*`` are safe to call speculatively after every completion:
an existing badge is returned with ``newly_awarded=False`` instead of an
error. The strict ``award_*`` variants raise ConflictError for repeats.
"""

from typing import Optional

from sqlalchemy.orm import Session as DBSession

from cringeshield.catalog.challenge_days import BADGE_MILESTONES, is_valid_milestone
from cringeshield.catalog.weekly_prompts import TOTAL_WEEKS, is_valid_week, parse_tier, prompt_ids_for_week
from cringeshield.errors import ConflictError, IneligibleError, StateError, ValidationError
from cringeshield.models.models import ChallengeBadge, WeeklyBadge
from cringeshield.services.progress_store import ProgressStore
from cringeshield.utils.logger import get_logger

logger = get_logger("badges")


def validate_milestone(milestone: object) -> int:
    if not is_valid_milestone(milestone):
        allowed = ", ".join(str(m) for m in BADGE_MILESTONES)
        raise ValidationError(f"Milestone must be one of: {allowed}")
    return int(milestone)  # type: ignore[arg-type]


def validate_tier_week(tier: object, week_number: object) -> tuple[str, int]:
    parsed = parse_tier(tier)
    if parsed is None:
        raise ValidationError(f"Invalid tier: {tier!r}")
    if not is_valid_week(week_number):
        raise ValidationError(f"Week number must be an integer between 1 and {TOTAL_WEEKS}")
    return parsed.value, int(week_number)  # type: ignore[arg-type]


class BadgeAwardService:
    def __init__(self, db: DBSession, store: Optional[ProgressStore] = None):
        self.db = db
        self.store = store or ProgressStore(db)

    # ----- 30-day milestones -----

    def list_challenge_badges(self, user_id: int) -> list[ChallengeBadge]:
        return self.store.list_challenge_badges(user_id)

    def _ensure_milestone_reached(self, user_id: int, milestone: int) -> None:
        completed = self.store.count_days(user_id)
        if completed < milestone:
            raise IneligibleError(
                f"Complete {milestone} challenge days to earn this badge",
                completed=completed,
                required=milestone,
            )

    def check_and_award_challenge_badge(self, user_id: int, milestone: object) -> tuple[ChallengeBadge, bool]:
        """Returns (badge, newly_awarded)."""
        m = validate_milestone(milestone)
        existing = self.store.get_challenge_badge(user_id, m)
        if existing is not None:
            return existing, False
        self._ensure_milestone_reached(user_id, m)
        badge, created = self.store.insert_challenge_badge(user_id, m)
        if created:
            logger.info("challenge badge awarded user_id=%s milestone=%s", user_id, m)
        return badge, created

    def award_challenge_badge(self, user_id: int, milestone: object) -> ChallengeBadge:
        m = validate_milestone(milestone)
        if self.store.get_challenge_badge(user_id, m) is not None:
            raise ConflictError(f"Badge for milestone {m} already awarded")
        badge, created = self.check_and_award_challenge_badge(user_id, m)
        if not created:
            raise ConflictError(f"Badge for milestone {m} already awarded")
        return badge

    def eligible_challenge_milestones(self, user_id: int) -> list[int]:
        """Milestones reached but not yet awarded."""
        completed = self.store.count_days(user_id)
        earned = {b.milestone for b in self.store.list_challenge_badges(user_id)}
        return [m for m in BADGE_MILESTONES if completed >= m and m not in earned]

    # ----- 15-week challenge -----

    def list_weekly_badges(self, user_id: int) -> list[WeeklyBadge]:
        return self.store.list_weekly_badges(user_id)

    def check_and_award_weekly_badge(
        self, user_id: int, tier: object, week_number: object
    ) -> tuple[WeeklyBadge, bool]:
        """Returns (badge, newly_awarded)."""
        t, week = validate_tier_week(tier, week_number)
        existing = self.store.get_weekly_badge(user_id, t, week)
        if existing is not None:
            return existing, False
        progress = self.store.get_weekly_progress(user_id)
        if progress is None:
            raise StateError("User has not started a weekly challenge")
        expected = prompt_ids_for_week(t, week)
        done = expected & set(progress.completed_prompts)
        if not expected or done != expected:
            raise IneligibleError(
                f"Complete all prompts for week {week} to earn this badge",
                completed=len(done),
                required=len(expected),
            )
        badge, created = self.store.insert_weekly_badge(user_id, t, week)
        if created:
            logger.info("weekly badge awarded user_id=%s tier=%s week=%s", user_id, t, week)
        return badge, created

    def award_weekly_badge(self, user_id: int, tier: object, week_number: object) -> WeeklyBadge:
        t, week = validate_tier_week(tier, week_number)
        if self.store.get_weekly_badge(user_id, t, week) is not None:
            raise ConflictError(f"Badge for week {week} already awarded")
        badge, created = self.check_and_award_weekly_badge(user_id, t, week)
        if not created:
            raise ConflictError(f"Badge for week {week} already awarded")
        return badge
