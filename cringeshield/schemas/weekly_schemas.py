"""
15-Week Tiered Challenge schemas.
"""

from typing import Any, Optional

from cringeshield.schemas.base import CamelModel
from cringeshield.utils.common import iso_format


class StartWeeklyChallengeRequest(CamelModel):
    tier: Any = None


class CompletePromptRequest(CamelModel):
    prompt_id: Any = None


class WeeklyBadgeRequest(CamelModel):
    tier: Any = None
    week_number: Any = None


class WeeklyProgressResponse(CamelModel):
    id: int
    user_id: int
    selected_tier: str
    start_date: str
    completed_prompts: list[str]


class WeeklyChallengeStatusResponse(CamelModel):
    status: str  # not_started|in_progress
    progress: Optional[WeeklyProgressResponse] = None


class WeeklyBadgeResponse(CamelModel):
    id: int
    user_id: int
    tier: str
    week_number: int
    earned_at: str
    newly_awarded: Optional[bool] = None


class WeeklyPromptResponse(CamelModel):
    id: str
    week: int
    tier: str
    order: int
    text: str
    title: Optional[str] = None


class WeekStatus(CamelModel):
    week: int
    completed: int
    total: int
    unlocked: bool
    badge_earned: bool


class WeeklySummaryResponse(CamelModel):
    tier: str
    start_date: str
    unlock_mode: str
    current_week: int
    progress_percentage: int
    completed_count: int
    weeks: list[WeekStatus]


def weekly_progress_response(p) -> WeeklyProgressResponse:
    return WeeklyProgressResponse(
        id=p.id,
        user_id=p.user_id,
        selected_tier=p.selected_tier,
        start_date=iso_format(p.start_date),
        completed_prompts=list(p.completed_prompts),
    )


def weekly_badge_response(b, newly_awarded: Optional[bool] = None) -> WeeklyBadgeResponse:
    return WeeklyBadgeResponse(
        id=b.id,
        user_id=b.user_id,
        tier=b.tier,
        week_number=b.week_number,
        earned_at=iso_format(b.earned_at),
        newly_awarded=newly_awarded,
    )


def weekly_prompt_response(p) -> WeeklyPromptResponse:
    return WeeklyPromptResponse(
        id=p.id,
        week=p.week,
        tier=p.tier.value,
        order=p.order,
        text=p.text,
        title=p.title,
    )
