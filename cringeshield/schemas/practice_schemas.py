from typing import Any, Optional
from pydantic import Field

from cringeshield.schemas.base import CamelModel


class CreatePracticeSessionRequest(CamelModel):
    date: Optional[str] = None  # ISO; defaults to now
    duration: int = Field(ge=0)  # seconds
    prompt_category: str = "free"
    prompt: str = "Free talk"
    filter: str = "none"
    confidence_score: int = 0
    user_rating: Optional[str] = None
    notes: Optional[Any] = None
    camera_on: bool = True


class PracticeSessionResponse(CamelModel):
    id: int
    user_id: int
    date: str
    duration: int
    prompt_category: str
    prompt: str
    filter: str
    confidence_score: int
    user_rating: Optional[str] = None
    notes: Optional[Any] = None
    camera_on: bool


class SpeakingPromptResponse(CamelModel):
    id: int
    category: str
    text: str


class CreatePromptCompletionRequest(CamelModel):
    prompt_text: str = Field(min_length=1)
    category: str = Field(min_length=1)


class PromptCompletionResponse(CamelModel):
    id: int
    user_id: int
    prompt_text: str
    category: str
    completed_at: str


class UserStatsResponse(CamelModel):
    total_sessions: int
    total_duration: int
    average_confidence: float
    prompt_completions: int
    challenge_days_completed: int
    challenge_badges: int
    weekly_prompts_completed: int
    weekly_badges: int
    last_session_date: Optional[str] = None


class NotificationPreferencesRequest(CamelModel):
    preferences: dict


class ThemeRequest(CamelModel):
    theme: str = Field(min_length=1)


class FeedbackResponse(CamelModel):
    strengths: list[str]
    improvements: list[str]
    confidence_score: int
