"""
User preferences and stats endpoints.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from cringeshield.config import get_db
from cringeshield.models.models import User
from cringeshield.schemas.practice_schemas import NotificationPreferencesRequest, ThemeRequest, UserStatsResponse
from cringeshield.services.practice_service import PracticeService
from cringeshield.utils.auth import get_current_user

user_routes = APIRouter()


@user_routes.get("/user/stats", response_model=UserStatsResponse)
async def get_user_stats(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> UserStatsResponse:
    """Totals for the lifetime stats card."""
    return PracticeService(db).user_stats(current_user.id)


@user_routes.patch("/notification-preferences")
async def update_notification_preferences(
    body: NotificationPreferencesRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> dict:
    """
    Update notification preferences (merge with existing).
    Use e.g. { "preferences": { "dailyReminder": true } }.
    """
    current = current_user.notification_preferences if isinstance(current_user.notification_preferences, dict) else {}
    current_user.notification_preferences = {**current, **body.preferences}
    db.add(current_user)
    db.commit()
    db.refresh(current_user)
    return {"preferences": current_user.notification_preferences}


@user_routes.patch("/theme")
async def update_theme(
    body: ThemeRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> dict:
    current_user.theme = body.theme
    db.add(current_user)
    db.commit()
    return {"theme": current_user.theme}
