from cringeshield.config import Base
from sqlalchemy import (
    Column,
    Integer,
    String,
    JSON,
    DateTime,
    ForeignKey,
    Text,
    Boolean,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from cringeshield.utils.common import utcnow


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    is_admin = Column(Boolean, default=False, nullable=False)
    notification_preferences = Column(JSON, nullable=True)
    theme = Column(String, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    practice_sessions = relationship("PracticeSession", backref="user", cascade="all, delete-orphan")
    prompt_completions = relationship("PromptCompletion", backref="user", cascade="all, delete-orphan")
    challenge_progress = relationship("ChallengeDayProgress", backref="user", cascade="all, delete-orphan")
    challenge_badges = relationship("ChallengeBadge", backref="user", cascade="all, delete-orphan")
    weekly_progress = relationship("WeeklyProgress", backref="user", cascade="all, delete-orphan", uselist=False)
    weekly_badges = relationship("WeeklyBadge", backref="user", cascade="all, delete-orphan")


class PracticeSession(Base):
    __tablename__ = "practice_sessions"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    date = Column(DateTime, default=utcnow, nullable=False)
    duration = Column(Integer, nullable=False)  # seconds
    prompt_category = Column(String, nullable=False, default="free")
    prompt = Column(Text, nullable=False, default="Free talk")
    filter = Column(String, nullable=False, default="none")
    confidence_score = Column(Integer, nullable=False, default=0)
    user_rating = Column(String, nullable=True)
    notes = Column(JSON, nullable=True)
    camera_on = Column(Boolean, default=True, nullable=False)


class SpeakingPrompt(Base):
    __tablename__ = "speaking_prompts"
    id = Column(Integer, primary_key=True, index=True)
    category = Column(String, index=True, nullable=False)
    text = Column(Text, nullable=False)


class PromptCompletion(Base):
    __tablename__ = "prompt_completions"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    prompt_text = Column(Text, nullable=False)
    category = Column(String, nullable=False)
    completed_at = Column(DateTime, default=utcnow, nullable=False)


class ChallengeDayProgress(Base):
    __tablename__ = "challenge_day_progress"
    __table_args__ = (UniqueConstraint("user_id", "day_number", name="uq_challenge_day_user_day"),)
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    day_number = Column(Integer, nullable=False)  # 1..30
    completed_at = Column(DateTime, default=utcnow, nullable=False)


class ChallengeBadge(Base):
    __tablename__ = "challenge_badges"
    __table_args__ = (UniqueConstraint("user_id", "milestone", name="uq_challenge_badge_user_milestone"),)
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    milestone = Column(Integer, nullable=False)  # 7|15|30
    earned_at = Column(DateTime, default=utcnow, nullable=False)


class WeeklyProgress(Base):
    __tablename__ = "weekly_progress"
    id = Column(Integer, primary_key=True, index=True)
    # One active enrollment per user.
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, index=True, nullable=False)
    selected_tier = Column(String, nullable=False)  # shy_starter|growing_speaker|confident_creator
    start_date = Column(DateTime, default=utcnow, nullable=False)

    completions = relationship(
        "WeeklyPromptCompletion",
        backref="progress",
        cascade="all, delete-orphan",
        order_by="WeeklyPromptCompletion.id",
    )

    @property
    def completed_prompts(self) -> list[str]:
        return [c.prompt_id for c in self.completions]


class WeeklyPromptCompletion(Base):
    __tablename__ = "weekly_prompt_completions"
    __table_args__ = (UniqueConstraint("progress_id", "prompt_id", name="uq_weekly_completion_progress_prompt"),)
    id = Column(Integer, primary_key=True, index=True)
    progress_id = Column(Integer, ForeignKey("weekly_progress.id", ondelete="CASCADE"), index=True, nullable=False)
    prompt_id = Column(String, nullable=False)
    completed_at = Column(DateTime, default=utcnow, nullable=False)


class WeeklyBadge(Base):
    __tablename__ = "weekly_badges"
    __table_args__ = (UniqueConstraint("user_id", "tier", "week_number", name="uq_weekly_badge_user_tier_week"),)
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    tier = Column(String, nullable=False)
    week_number = Column(Integer, nullable=False)  # 1..15
    earned_at = Column(DateTime, default=utcnow, nullable=False)
