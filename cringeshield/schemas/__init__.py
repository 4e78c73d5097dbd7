"""
API schemas package. Import from submodules or from this package.

Example:
    from cringeshield.schemas import WeeklyBadgeResponse
    from cringeshield.schemas.weekly_schemas import WeeklyBadgeResponse
"""

from cringeshield.schemas.auth_schemas import (
    AuthTokenPayload,
    CurrentUserResponse,
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    RegisterRequest,
    RegisterResponse,
)
from cringeshield.schemas.challenge_schemas import (
    ChallengeBadgeResponse,
    ChallengeDayProgressResponse,
    ChallengeDayResponse,
    ChallengeSummaryResponse,
    CompleteDayRequest,
    DayStatusResponse,
    MilestoneRequest,
    MilestoneStatus,
)
from cringeshield.schemas.weekly_schemas import (
    CompletePromptRequest,
    StartWeeklyChallengeRequest,
    WeekStatus,
    WeeklyBadgeRequest,
    WeeklyBadgeResponse,
    WeeklyChallengeStatusResponse,
    WeeklyProgressResponse,
    WeeklyPromptResponse,
    WeeklySummaryResponse,
)
from cringeshield.schemas.practice_schemas import (
    CreatePracticeSessionRequest,
    CreatePromptCompletionRequest,
    NotificationPreferencesRequest,
    PracticeSessionResponse,
    FeedbackResponse,
    PromptCompletionResponse,
    SpeakingPromptResponse,
    ThemeRequest,
    UserStatsResponse,
)
from cringeshield.schemas.admin_schemas import (
    AdminUserDetails,
    AdminUserListItem,
    AdminUserStats,
    ChallengeCompletionStats,
    GlobalStatsResponse,
)

__all__ = [
    # auth
    "AuthTokenPayload",
    "CurrentUserResponse",
    "LoginRequest",
    "LoginResponse",
    "LogoutResponse",
    "RegisterRequest",
    "RegisterResponse",
    # 30-day challenge
    "ChallengeBadgeResponse",
    "ChallengeDayProgressResponse",
    "ChallengeDayResponse",
    "ChallengeSummaryResponse",
    "CompleteDayRequest",
    "DayStatusResponse",
    "MilestoneRequest",
    "MilestoneStatus",
    # weekly challenge
    "CompletePromptRequest",
    "StartWeeklyChallengeRequest",
    "WeekStatus",
    "WeeklyBadgeRequest",
    "WeeklyBadgeResponse",
    "WeeklyChallengeStatusResponse",
    "WeeklyProgressResponse",
    "WeeklyPromptResponse",
    "WeeklySummaryResponse",
    # practice
    "CreatePracticeSessionRequest",
    "CreatePromptCompletionRequest",
    "NotificationPreferencesRequest",
    "PracticeSessionResponse",
    "FeedbackResponse",
    "PromptCompletionResponse",
    "SpeakingPromptResponse",
    "ThemeRequest",
    "UserStatsResponse",
    # admin
    "AdminUserDetails",
    "AdminUserListItem",
    "AdminUserStats",
    "ChallengeCompletionStats",
    "GlobalStatsResponse",
]
