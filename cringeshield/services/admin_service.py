"""
Read-only aggregate queries for the admin dashboard.
"""

from sqlalchemy import func
from sqlalchemy.orm import Session as DBSession

from cringeshield.catalog.challenge_days import BADGE_MILESTONES
from cringeshield.errors import NotFoundError
from cringeshield.models.models import ChallengeDayProgress, PracticeSession, PromptCompletion, User
from cringeshield.schemas.admin_schemas import (
    AdminUserDetails,
    AdminUserListItem,
    AdminUserStats,
    ChallengeCompletionStats,
    GlobalStatsResponse,
)
from cringeshield.schemas.challenge_schemas import challenge_badge_response
from cringeshield.schemas.weekly_schemas import weekly_badge_response
from cringeshield.services.practice_service import PracticeService
from cringeshield.services.progress_read_model import round_percent
from cringeshield.services.progress_store import ProgressStore
from cringeshield.utils.common import iso_format


def user_list_item(user: User) -> AdminUserListItem:
    return AdminUserListItem(
        id=user.id,
        email=user.email,
        created_at=iso_format(user.created_at),
        is_admin=bool(user.is_admin),
    )


class AdminService:
    def __init__(self, db: DBSession):
        self.db = db

    def _total(self, model) -> int:
        return int(self.db.query(func.count(model.id)).scalar() or 0)

    def global_stats(self) -> GlobalStatsResponse:
        total_users = self._total(User)
        total_completions = self._total(PromptCompletion)

        # Users per completed-day count, then share reaching each milestone.
        day_counts = (
            self.db.query(ChallengeDayProgress.user_id, func.count(ChallengeDayProgress.id))
            .group_by(ChallengeDayProgress.user_id)
            .all()
        )
        reached = {m: sum(1 for _, n in day_counts if n >= m) for m in BADGE_MILESTONES}

        return GlobalStatsResponse(
            total_users=total_users,
            total_sessions=self._total(PracticeSession),
            total_prompt_completions=total_completions,
            avg_prompts_per_user=round(total_completions / total_users, 1) if total_users else 0.0,
            challenge_completion=ChallengeCompletionStats(
                day7_percentage=round_percent(reached[7], total_users),
                day15_percentage=round_percent(reached[15], total_users),
                day30_percentage=round_percent(reached[30], total_users),
            ),
        )

    def list_users(self) -> list[AdminUserListItem]:
        users = self.db.query(User).order_by(User.created_at.desc(), User.id.desc()).all()
        return [user_list_item(u) for u in users]

    def user_details(self, user_id: int) -> AdminUserDetails:
        user = self.db.query(User).filter(User.id == user_id).first()
        if user is None:
            raise NotFoundError("User not found")
        stats = PracticeService(self.db).user_stats(user_id)
        store = ProgressStore(self.db)
        weekly_badges = store.list_weekly_badges(user_id)
        challenge_badges = store.list_challenge_badges(user_id)
        return AdminUserDetails(
            user=user_list_item(user),
            stats=AdminUserStats(
                total_sessions=stats.total_sessions,
                total_completions=stats.prompt_completions,
                challenge_days_completed=stats.challenge_days_completed,
                weekly_prompts=stats.weekly_prompts_completed,
                weekly_badges_earned=len(weekly_badges),
                challenge_badges_earned=len(challenge_badges),
                last_session_date=stats.last_session_date,
            ),
            weekly_badges=[weekly_badge_response(b) for b in weekly_badges],
            challenge_badges=[challenge_badge_response(b) for b in challenge_badges],
        )
