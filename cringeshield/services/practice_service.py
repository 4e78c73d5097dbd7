"""
Free practice: recorded sessions, speaking prompts and prompt completions,
plus the per-user stats card.
"""

import random
from datetime import datetime
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session as DBSession

from cringeshield.catalog.feedback import (
    FEEDBACK_IMPROVEMENTS,
    FEEDBACK_STRENGTHS,
    MAX_FEEDBACK_SCORE,
    MIN_FEEDBACK_SCORE,
)
from cringeshield.catalog.speaking_prompts import RANDOM_CATEGORY, iter_seed_prompts
from cringeshield.errors import NotFoundError, ValidationError
from cringeshield.models.models import (
    ChallengeBadge,
    ChallengeDayProgress,
    PracticeSession,
    PromptCompletion,
    SpeakingPrompt,
    WeeklyBadge,
    WeeklyProgress,
)
from cringeshield.schemas.practice_schemas import CreatePracticeSessionRequest, FeedbackResponse, UserStatsResponse
from cringeshield.utils.common import as_naive_utc, iso_format, utcnow
from cringeshield.utils.logger import get_logger, log_request

logger = get_logger("practice")


def _parse_date(value: Optional[str]) -> datetime:
    if not value:
        return utcnow()
    try:
        return as_naive_utc(datetime.fromisoformat(value.replace("Z", "+00:00")))
    except ValueError:
        raise ValidationError(f"Invalid session date: {value!r}") from None


class PracticeService:
    def __init__(self, db: DBSession, rng: Optional[random.Random] = None):
        self.db = db
        self.rng = rng or random.Random()

    # ----- prompts -----

    def seed_prompts(self) -> int:
        """Insert the seed prompts when the table is empty. Returns rows inserted."""
        if self.db.query(func.count(SpeakingPrompt.id)).scalar():
            return 0
        with log_request(logger, "seed speaking prompts"):
            rows = [SpeakingPrompt(category=c, text=t) for c, t in iter_seed_prompts()]
            self.db.add_all(rows)
            self.db.commit()
        return len(rows)

    def prompts_by_category(self, category: str) -> list[SpeakingPrompt]:
        q = self.db.query(SpeakingPrompt)
        if category != RANDOM_CATEGORY:
            q = q.filter(SpeakingPrompt.category == category)
        return q.order_by(SpeakingPrompt.id.asc()).all()

    def random_prompt(self, category: Optional[str]) -> SpeakingPrompt:
        category = (category or RANDOM_CATEGORY).strip().lower()
        prompts = self.prompts_by_category(category)
        if not prompts:
            raise NotFoundError("No prompts found for this category")
        return self.rng.choice(prompts)

    # ----- feedback -----

    def analyze_feedback(self, recording: bytes, prompt_text: str = "") -> FeedbackResponse:
        """
        Coaching feedback for a recorded answer: 2-3 strengths, 1-2 things to
        work on and a confidence score. The recording itself is not decoded.
        """
        if not recording:
            raise ValidationError("No recording file uploaded")
        strengths = self.rng.sample(FEEDBACK_STRENGTHS, self.rng.randint(2, 3))
        improvements = self.rng.sample(FEEDBACK_IMPROVEMENTS, self.rng.randint(1, 2))
        score = self.rng.randint(MIN_FEEDBACK_SCORE, MAX_FEEDBACK_SCORE)
        logger.info("feedback generated bytes=%s prompt_len=%s score=%s", len(recording), len(prompt_text), score)
        return FeedbackResponse(strengths=strengths, improvements=improvements, confidence_score=score)

    # ----- sessions -----

    def create_session(self, user_id: int, req: CreatePracticeSessionRequest) -> PracticeSession:
        session = PracticeSession(
            user_id=user_id,
            date=_parse_date(req.date),
            duration=req.duration,
            prompt_category=req.prompt_category,
            prompt=req.prompt,
            filter=req.filter,
            confidence_score=req.confidence_score,
            user_rating=req.user_rating,
            notes=req.notes,
            camera_on=req.camera_on,
        )
        self.db.add(session)
        self.db.commit()
        self.db.refresh(session)
        logger.info("practice session saved user_id=%s duration=%s", user_id, req.duration)
        return session

    def list_sessions(self, user_id: int) -> list[PracticeSession]:
        return (
            self.db.query(PracticeSession)
            .filter(PracticeSession.user_id == user_id)
            .order_by(PracticeSession.date.desc(), PracticeSession.id.desc())
            .all()
        )

    # ----- prompt completions -----

    def list_completions(self, user_id: int) -> list[PromptCompletion]:
        return (
            self.db.query(PromptCompletion)
            .filter(PromptCompletion.user_id == user_id)
            .order_by(PromptCompletion.completed_at.desc(), PromptCompletion.id.desc())
            .all()
        )

    def create_completion(self, user_id: int, prompt_text: str, category: str) -> PromptCompletion:
        completion = PromptCompletion(user_id=user_id, prompt_text=prompt_text, category=category, completed_at=utcnow())
        self.db.add(completion)
        self.db.commit()
        self.db.refresh(completion)
        return completion

    # ----- stats -----

    def user_stats(self, user_id: int) -> UserStatsResponse:
        count, total_duration, avg_conf, last_date = (
            self.db.query(
                func.count(PracticeSession.id),
                func.coalesce(func.sum(PracticeSession.duration), 0),
                func.avg(PracticeSession.confidence_score),
                func.max(PracticeSession.date),
            )
            .filter(PracticeSession.user_id == user_id)
            .one()
        )
        weekly = self.db.query(WeeklyProgress).filter(WeeklyProgress.user_id == user_id).first()
        return UserStatsResponse(
            total_sessions=int(count or 0),
            total_duration=int(total_duration or 0),
            average_confidence=round(float(avg_conf), 1) if avg_conf is not None else 0.0,
            prompt_completions=self._count(PromptCompletion, user_id),
            challenge_days_completed=self._count(ChallengeDayProgress, user_id),
            challenge_badges=self._count(ChallengeBadge, user_id),
            weekly_prompts_completed=len(weekly.completed_prompts) if weekly else 0,
            weekly_badges=self._count(WeeklyBadge, user_id),
            last_session_date=iso_format(last_date),
        )

    def _count(self, model, user_id: int) -> int:
        return int(self.db.query(func.count(model.id)).filter(model.user_id == user_id).scalar() or 0)
