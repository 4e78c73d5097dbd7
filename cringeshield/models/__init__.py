"""
ORM entities. Single import surface for DB tables.

- User
- PracticeSession, SpeakingPrompt, PromptCompletion
- ChallengeDayProgress, ChallengeBadge (30-day challenge)
- WeeklyProgress, WeeklyPromptCompletion, WeeklyBadge (15-week tiered challenge)
"""

from cringeshield.models.models import (
    User,
    PracticeSession,
    SpeakingPrompt,
    PromptCompletion,
    ChallengeDayProgress,
    ChallengeBadge,
    WeeklyProgress,
    WeeklyPromptCompletion,
    WeeklyBadge,
)

__all__ = [
    "User",
    "PracticeSession",
    "SpeakingPrompt",
    "PromptCompletion",
    "ChallengeDayProgress",
    "ChallengeBadge",
    "WeeklyProgress",
    "WeeklyPromptCompletion",
    "WeeklyBadge",
]
