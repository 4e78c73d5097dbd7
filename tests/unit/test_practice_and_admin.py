"""Unit tests for free practice, user stats and admin aggregates."""
import random

import pytest

from cringeshield.catalog.feedback import FEEDBACK_IMPROVEMENTS, FEEDBACK_STRENGTHS
from cringeshield.catalog.speaking_prompts import SEED_PROMPTS
from cringeshield.errors import NotFoundError, ValidationError
from cringeshield.schemas.practice_schemas import CreatePracticeSessionRequest
from cringeshield.services.admin_service import AdminService
from cringeshield.services.badge_service import BadgeAwardService
from cringeshield.services.completion_service import CompletionService
from cringeshield.services.practice_service import PracticeService


@pytest.mark.unit
class TestPrompts:
    def test_seed_once(self, db_session):
        service = PracticeService(db_session)
        total = sum(len(v) for v in SEED_PROMPTS.values())
        assert service.seed_prompts() == total
        assert service.seed_prompts() == 0

    def test_random_prompt_by_category(self, db_session):
        service = PracticeService(db_session, rng=random.Random(1))
        service.seed_prompts()
        assert service.random_prompt("interview").category == "interview"
        assert service.random_prompt("random").category in SEED_PROMPTS
        assert service.random_prompt(None).category in SEED_PROMPTS

    def test_unknown_category(self, db_session):
        service = PracticeService(db_session)
        service.seed_prompts()
        with pytest.raises(NotFoundError):
            service.random_prompt("karaoke")


@pytest.mark.unit
class TestSessions:
    def test_create_and_list_newest_first(self, db_session, user):
        service = PracticeService(db_session)
        service.create_session(user.id, CreatePracticeSessionRequest(date="2024-01-01T10:00:00Z", duration=60, confidence_score=4))
        service.create_session(user.id, CreatePracticeSessionRequest(date="2024-02-01T10:00:00Z", duration=90, confidence_score=5))
        sessions = service.list_sessions(user.id)
        assert [s.duration for s in sessions] == [90, 60]

    def test_bad_date(self, db_session, user):
        with pytest.raises(ValidationError):
            PracticeService(db_session).create_session(user.id, CreatePracticeSessionRequest(date="yesterday", duration=10))

    def test_user_stats(self, db_session, user):
        practice = PracticeService(db_session)
        practice.create_session(user.id, CreatePracticeSessionRequest(duration=60, confidence_score=3))
        practice.create_session(user.id, CreatePracticeSessionRequest(duration=30, confidence_score=4))
        practice.create_completion(user.id, "Tell me about yourself.", "interview")
        completion = CompletionService(db_session)
        for day in range(1, 8):
            completion.complete_challenge_day(user.id, day)
        BadgeAwardService(db_session).check_and_award_challenge_badge(user.id, 7)
        completion.start_weekly_challenge(user.id, "shy_starter")
        completion.complete_weekly_prompt(user.id, "shy_w1_p1")

        stats = practice.user_stats(user.id)
        assert stats.total_sessions == 2
        assert stats.total_duration == 90
        assert stats.average_confidence == 3.5
        assert stats.prompt_completions == 1
        assert stats.challenge_days_completed == 7
        assert stats.challenge_badges == 1
        assert stats.weekly_prompts_completed == 1
        assert stats.weekly_badges == 0
        assert stats.last_session_date is not None

    def test_empty_stats(self, db_session, user):
        stats = PracticeService(db_session).user_stats(user.id)
        assert stats.total_sessions == 0
        assert stats.average_confidence == 0.0
        assert stats.last_session_date is None


@pytest.mark.unit
class TestAdminService:
    def test_global_stats(self, db_session, make_user):
        a, b = make_user(), make_user()
        completion = CompletionService(db_session)
        for day in range(1, 8):
            completion.complete_challenge_day(a.id, day)
        completion.complete_challenge_day(b.id, 1)
        PracticeService(db_session).create_completion(a.id, "Intro", "casual")

        stats = AdminService(db_session).global_stats()
        assert stats.total_users == 2
        assert stats.total_prompt_completions == 1
        assert stats.avg_prompts_per_user == 0.5
        assert stats.challenge_completion.day7_percentage == 50
        assert stats.challenge_completion.day15_percentage == 0

    def test_user_details(self, db_session, user):
        details = AdminService(db_session).user_details(user.id)
        assert details.user.email == user.email
        assert details.stats.total_sessions == 0
        assert details.weekly_badges == [] and details.challenge_badges == []

    def test_unknown_user(self, db_session):
        with pytest.raises(NotFoundError):
            AdminService(db_session).user_details(999)


@pytest.mark.unit
class TestFeedback:
    @pytest.mark.parametrize("seed", range(20))
    def test_shape_and_bounds(self, db_session, seed):
        feedback = PracticeService(db_session, rng=random.Random(seed)).analyze_feedback(b"clip", "Introduce yourself")
        assert 2 <= len(feedback.strengths) <= 3
        assert 1 <= len(feedback.improvements) <= 2
        assert len(set(feedback.strengths)) == len(feedback.strengths)
        assert set(feedback.strengths) <= set(FEEDBACK_STRENGTHS)
        assert set(feedback.improvements) <= set(FEEDBACK_IMPROVEMENTS)
        assert 55 <= feedback.confidence_score <= 84

    def test_same_seed_same_feedback(self, db_session):
        first = PracticeService(db_session, rng=random.Random(7)).analyze_feedback(b"clip")
        second = PracticeService(db_session, rng=random.Random(7)).analyze_feedback(b"clip")
        assert first == second

    def test_missing_recording(self, db_session):
        with pytest.raises(ValidationError):
            PracticeService(db_session).analyze_feedback(b"")
