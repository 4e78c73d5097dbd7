from typing import Optional

from cringeshield.schemas.base import CamelModel
from cringeshield.schemas.challenge_schemas import ChallengeBadgeResponse
from cringeshield.schemas.weekly_schemas import WeeklyBadgeResponse


class ChallengeCompletionStats(CamelModel):
    day7_percentage: int
    day15_percentage: int
    day30_percentage: int


class GlobalStatsResponse(CamelModel):
    total_users: int
    total_sessions: int
    total_prompt_completions: int
    avg_prompts_per_user: float
    challenge_completion: ChallengeCompletionStats


class AdminUserListItem(CamelModel):
    id: int
    email: str
    created_at: Optional[str] = None
    is_admin: bool


class AdminUserStats(CamelModel):
    total_sessions: int
    total_completions: int
    challenge_days_completed: int
    weekly_prompts: int
    weekly_badges_earned: int
    challenge_badges_earned: int
    last_session_date: Optional[str] = None


class AdminUserDetails(CamelModel):
    user: AdminUserListItem
    stats: AdminUserStats
    weekly_badges: list[WeeklyBadgeResponse]
    challenge_badges: list[ChallengeBadgeResponse]
