"""
UI-facing read models: percentages, per-week counts and lock states.
Nothing here writes to the database.
"""

import math
from collections.abc import Iterable
from datetime import datetime
from typing import Optional

from cringeshield.catalog.challenge_days import BADGE_MILESTONES, MILESTONE_BADGES, TOTAL_CHALLENGE_DAYS
from cringeshield.catalog.weekly_prompts import (
    TOTAL_PROMPTS_PER_TIER,
    TOTAL_WEEKS,
    WeeklyChallengeTier,
    prompt_ids_for_week,
    prompts_for_tier,
)
from cringeshield.models.models import ChallengeBadge, ChallengeDayProgress, WeeklyBadge, WeeklyProgress
from cringeshield.schemas.challenge_schemas import ChallengeSummaryResponse, MilestoneStatus
from cringeshield.schemas.weekly_schemas import WeeklySummaryResponse, WeekStatus
from cringeshield.services.unlock_policy import UnlockMode, current_week, resolve_unlock_mode, unlocked_weeks
from cringeshield.utils.common import iso_format


def round_percent(numerator: int, denominator: int) -> int:
    """Half-up rounding of a percentage."""
    if denominator <= 0:
        return 0
    return int(math.floor(100 * numerator / denominator + 0.5))


def get_progress_percentage(tier: WeeklyChallengeTier | str, completed_prompt_ids: Iterable[str]) -> int:
    """
    Percent of the 15-week challenge completed for ``tier``.

    The denominator is fixed at 45 (15 weeks x 3 prompts) for every tier;
    ids belonging to other tiers are ignored.
    """
    tier_ids = {p.id for p in prompts_for_tier(tier)}
    completed = {pid for pid in completed_prompt_ids if pid in tier_ids}
    return round_percent(len(completed), TOTAL_PROMPTS_PER_TIER)


def week_completion_count(
    tier: WeeklyChallengeTier | str, week: int, completed_prompt_ids: Iterable[str]
) -> tuple[int, int]:
    """(completed, total) prompts for one week, e.g. (2, 3)."""
    expected = prompt_ids_for_week(tier, week)
    return len(expected & set(completed_prompt_ids)), len(expected)


def is_week_complete(tier: WeeklyChallengeTier | str, week: int, completed_prompt_ids: Iterable[str]) -> bool:
    done, total = week_completion_count(tier, week, completed_prompt_ids)
    return total > 0 and done == total


def challenge_day_percentage(completed_day_count: int) -> int:
    return round_percent(min(completed_day_count, TOTAL_CHALLENGE_DAYS), TOTAL_CHALLENGE_DAYS)


def build_weekly_summary(
    progress: WeeklyProgress,
    badges: Iterable[WeeklyBadge],
    *,
    mode: UnlockMode | str = UnlockMode.TIME,
    now: Optional[datetime] = None,
) -> WeeklySummaryResponse:
    tier = progress.selected_tier
    completed = set(progress.completed_prompts)
    unlock_mode = resolve_unlock_mode(mode)
    unlocked = set(unlocked_weeks(progress.start_date, completed, unlock_mode, now))
    earned = {b.week_number for b in badges if b.tier == tier}

    weeks: list[WeekStatus] = []
    for week in range(1, TOTAL_WEEKS + 1):
        done, total = week_completion_count(tier, week, completed)
        weeks.append(
            WeekStatus(
                week=week,
                completed=done,
                total=total,
                unlocked=week in unlocked,
                badge_earned=week in earned,
            )
        )

    tier_ids = {p.id for p in prompts_for_tier(tier)}
    return WeeklySummaryResponse(
        tier=tier,
        start_date=iso_format(progress.start_date),
        unlock_mode=unlock_mode.value,
        current_week=current_week(progress.start_date, now),
        progress_percentage=get_progress_percentage(tier, completed),
        completed_count=len(completed & tier_ids),
        weeks=weeks,
    )


def build_challenge_summary(
    days: Iterable[ChallengeDayProgress],
    badges: Iterable[ChallengeBadge],
) -> ChallengeSummaryResponse:
    completed_days = sorted({d.day_number for d in days})
    earned = {b.milestone for b in badges}
    done = set(completed_days)
    remaining = [d for d in range(1, TOTAL_CHALLENGE_DAYS + 1) if d not in done]
    milestones = [
        MilestoneStatus(
            milestone=m,
            name=MILESTONE_BADGES[m].name,
            description=MILESTONE_BADGES[m].description,
            emoji=MILESTONE_BADGES[m].emoji,
            earned=m in earned,
            eligible=m not in earned and len(completed_days) >= m,
        )
        for m in BADGE_MILESTONES
    ]
    return ChallengeSummaryResponse(
        completed_days=completed_days,
        completed_count=len(completed_days),
        total_days=TOTAL_CHALLENGE_DAYS,
        progress_percentage=challenge_day_percentage(len(completed_days)),
        next_day=remaining[0] if remaining else None,
        milestones=milestones,
    )
