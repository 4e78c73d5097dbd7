"""
30-Day Challenge schemas: day progress, milestone badges and summary.
"""

from typing import Any, Optional

from cringeshield.catalog.challenge_days import MILESTONE_BADGES
from cringeshield.schemas.base import CamelModel
from cringeshield.utils.common import iso_format


class CompleteDayRequest(CamelModel):
    # Validated by the completion service so bad values answer 400, not 422.
    day_number: Any = None


class ChallengeDayProgressResponse(CamelModel):
    id: int
    user_id: int
    day_number: int
    completed_at: str


class DayStatusResponse(CamelModel):
    day_number: int
    is_completed: bool


class MilestoneRequest(CamelModel):
    milestone: Any = None


class ChallengeBadgeResponse(CamelModel):
    id: int
    user_id: int
    milestone: int
    earned_at: str
    name: Optional[str] = None
    emoji: Optional[str] = None
    newly_awarded: Optional[bool] = None


class ChallengeDayResponse(CamelModel):
    day: int
    title: str
    description: str


class MilestoneStatus(CamelModel):
    milestone: int
    name: str
    description: str
    emoji: str
    earned: bool
    eligible: bool


class ChallengeSummaryResponse(CamelModel):
    completed_days: list[int]
    completed_count: int
    total_days: int
    progress_percentage: int
    next_day: Optional[int] = None
    milestones: list[MilestoneStatus]


def day_progress_response(p) -> ChallengeDayProgressResponse:
    return ChallengeDayProgressResponse(
        id=p.id,
        user_id=p.user_id,
        day_number=p.day_number,
        completed_at=iso_format(p.completed_at),
    )


def challenge_badge_response(b, newly_awarded: Optional[bool] = None) -> ChallengeBadgeResponse:
    info = MILESTONE_BADGES.get(b.milestone)
    return ChallengeBadgeResponse(
        id=b.id,
        user_id=b.user_id,
        milestone=b.milestone,
        earned_at=iso_format(b.earned_at),
        name=info.name if info else None,
        emoji=info.emoji if info else None,
        newly_awarded=newly_awarded,
    )
