"""
30-Day Challenge endpoints: day completion and milestone badges.
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from cringeshield.catalog.challenge_days import CHALLENGE_DAYS
from cringeshield.config import get_db
from cringeshield.models.models import User
from cringeshield.schemas.challenge_schemas import (
    ChallengeBadgeResponse,
    ChallengeDayProgressResponse,
    ChallengeDayResponse,
    ChallengeSummaryResponse,
    CompleteDayRequest,
    DayStatusResponse,
    MilestoneRequest,
    challenge_badge_response,
    day_progress_response,
)
from cringeshield.services.badge_service import BadgeAwardService
from cringeshield.services.completion_service import CompletionService, validate_day_number
from cringeshield.services.progress_read_model import build_challenge_summary
from cringeshield.utils.auth import get_current_user

challenge_routes = APIRouter()


@challenge_routes.get("/challenge-days", response_model=list[ChallengeDayResponse])
async def list_challenge_days() -> list[ChallengeDayResponse]:
    """The 30 daily speaking tasks. Every day is selectable at any time."""
    return [ChallengeDayResponse(day=d.day, title=d.title, description=d.description) for d in CHALLENGE_DAYS]


@challenge_routes.get("/challenge-progress", response_model=list[ChallengeDayProgressResponse])
async def get_challenge_progress(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[ChallengeDayProgressResponse]:
    days = CompletionService(db).list_challenge_days(current_user.id)
    return [day_progress_response(d) for d in days]


@challenge_routes.post(
    "/challenge-progress",
    response_model=ChallengeDayProgressResponse,
    status_code=status.HTTP_201_CREATED,
)
async def complete_challenge_day(
    body: CompleteDayRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> ChallengeDayProgressResponse:
    """Mark a day complete. Completing the same day again returns the original record."""
    record, _ = CompletionService(db).complete_challenge_day(current_user.id, body.day_number)
    return day_progress_response(record)


@challenge_routes.get("/challenge-progress/summary", response_model=ChallengeSummaryResponse)
async def get_challenge_summary(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> ChallengeSummaryResponse:
    """Completed days, percentage and milestone states for the progress page."""
    days = CompletionService(db).list_challenge_days(current_user.id)
    badges = BadgeAwardService(db).list_challenge_badges(current_user.id)
    return build_challenge_summary(days, badges)


@challenge_routes.get("/challenge-progress/{day_number}", response_model=DayStatusResponse)
async def get_day_status(
    day_number: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> DayStatusResponse:
    raw: object = int(day_number) if day_number.isascii() and day_number.isdigit() else day_number
    day = validate_day_number(raw)
    completed = CompletionService(db).is_day_completed(current_user.id, day)
    return DayStatusResponse(day_number=day, is_completed=completed)


@challenge_routes.get("/challenge-badges", response_model=list[ChallengeBadgeResponse])
async def get_challenge_badges(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[ChallengeBadgeResponse]:
    badges = BadgeAwardService(db).list_challenge_badges(current_user.id)
    return [challenge_badge_response(b) for b in badges]


@challenge_routes.post(
    "/challenge-badges/award",
    response_model=ChallengeBadgeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def award_challenge_badge(
    body: MilestoneRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> ChallengeBadgeResponse:
    """Award a milestone badge; 409 if it was already awarded."""
    badge = BadgeAwardService(db).award_challenge_badge(current_user.id, body.milestone)
    return challenge_badge_response(badge, newly_awarded=True)


@challenge_routes.post("/challenge-badges/check-and-award", response_model=ChallengeBadgeResponse)
async def check_and_award_challenge_badge(
    body: MilestoneRequest,
    response: Response,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> ChallengeBadgeResponse:
    """
    Award the milestone badge if earned. 201 with the new badge, 200 with the
    existing one, 400 with completed/required counts when not yet eligible.
    """
    badge, created = BadgeAwardService(db).check_and_award_challenge_badge(current_user.id, body.milestone)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return challenge_badge_response(badge, newly_awarded=created)
