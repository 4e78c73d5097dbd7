"""
Records completion of challenge units, exactly once per unit.

Badge evaluation is not chained here; callers trigger it separately through
``BadgeAwardService`` so the award step can be retried on its own.
"""

from typing import Optional

from sqlalchemy.orm import Session as DBSession

from cringeshield.catalog.challenge_days import TOTAL_CHALLENGE_DAYS, is_valid_day
from cringeshield.catalog.weekly_prompts import get_prompt_by_id, parse_tier
from cringeshield.errors import ConflictError, NotFoundError, StateError, ValidationError
from cringeshield.models.models import ChallengeDayProgress, WeeklyProgress
from cringeshield.services.progress_store import ProgressStore
from cringeshield.utils.logger import get_logger

logger = get_logger("completion")


def validate_day_number(day_number: object) -> int:
    if not is_valid_day(day_number):
        raise ValidationError(f"Day number must be an integer between 1 and {TOTAL_CHALLENGE_DAYS}")
    return int(day_number)  # type: ignore[arg-type]


class CompletionService:
    """Completion events for the 30-day and 15-week challenges."""

    def __init__(self, db: DBSession, store: Optional[ProgressStore] = None):
        self.db = db
        self.store = store or ProgressStore(db)

    # ----- 30-day challenge -----

    def list_challenge_days(self, user_id: int) -> list[ChallengeDayProgress]:
        return self.store.list_days(user_id)

    def is_day_completed(self, user_id: int, day_number: object) -> bool:
        day = validate_day_number(day_number)
        return self.store.get_day(user_id, day) is not None

    def complete_challenge_day(self, user_id: int, day_number: object) -> tuple[ChallengeDayProgress, bool]:
        """Mark a day complete. Returns (record, created); repeats return the existing record."""
        day = validate_day_number(day_number)
        record, created = self.store.insert_day(user_id, day)
        if created:
            logger.info("challenge day completed user_id=%s day=%s", user_id, day)
        else:
            logger.debug("challenge day already completed user_id=%s day=%s", user_id, day)
        return record, created

    # ----- 15-week challenge -----

    def get_weekly_progress(self, user_id: int) -> Optional[WeeklyProgress]:
        return self.store.get_weekly_progress(user_id)

    def start_weekly_challenge(self, user_id: int, tier: object) -> WeeklyProgress:
        """Enroll the user in a tier. The tier cannot be changed once chosen."""
        parsed = parse_tier(tier)
        if parsed is None:
            raise ValidationError(f"Invalid tier: {tier!r}")
        if self.store.get_weekly_progress(user_id) is not None:
            raise ConflictError("Weekly challenge already started")
        progress, created = self.store.insert_weekly_progress(user_id, parsed.value)
        if not created:
            raise ConflictError("Weekly challenge already started")
        logger.info("weekly challenge started user_id=%s tier=%s", user_id, parsed.value)
        return progress

    def complete_weekly_prompt(self, user_id: int, prompt_id: object) -> WeeklyProgress:
        """Add a prompt to the user's completion set (set-union; repeats are no-ops)."""
        if not isinstance(prompt_id, str) or not prompt_id.strip():
            raise ValidationError("promptId is required")
        prompt = get_prompt_by_id(prompt_id)
        if prompt is None:
            raise NotFoundError(f"Unknown weekly prompt: {prompt_id}")
        progress = self.store.get_weekly_progress(user_id)
        if progress is None:
            raise StateError("User has not started a weekly challenge")
        if self.store.add_weekly_completion(progress, prompt.id):
            logger.info("weekly prompt completed user_id=%s prompt_id=%s", user_id, prompt.id)
        else:
            logger.debug("weekly prompt already completed user_id=%s prompt_id=%s", user_id, prompt.id)
        return progress
