"""
15-Week Tiered Challenge endpoints: enrollment, prompt completion and weekly badges.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from cringeshield.catalog.weekly_prompts import ALL_WEEKLY_PROMPTS, TOTAL_WEEKS, is_valid_week, parse_tier
from cringeshield.config import get_db, settings
from cringeshield.errors import StateError, ValidationError
from cringeshield.models.models import User
from cringeshield.schemas.weekly_schemas import (
    CompletePromptRequest,
    StartWeeklyChallengeRequest,
    WeeklyBadgeRequest,
    WeeklyBadgeResponse,
    WeeklyChallengeStatusResponse,
    WeeklyProgressResponse,
    WeeklyPromptResponse,
    WeeklySummaryResponse,
    weekly_badge_response,
    weekly_progress_response,
    weekly_prompt_response,
)
from cringeshield.services.badge_service import BadgeAwardService
from cringeshield.services.completion_service import CompletionService
from cringeshield.services.progress_read_model import build_weekly_summary
from cringeshield.utils.auth import get_current_user

weekly_routes = APIRouter()


@weekly_routes.get("/weekly-prompts", response_model=list[WeeklyPromptResponse])
async def list_weekly_prompts(
    tier: Optional[str] = Query(None, description="shy_starter | growing_speaker | confident_creator"),
    week: Optional[int] = Query(None, description="Week number 1-15"),
) -> list[WeeklyPromptResponse]:
    """Prompt catalog, optionally filtered by tier and/or week."""
    prompts = list(ALL_WEEKLY_PROMPTS)
    if tier is not None:
        parsed = parse_tier(tier)
        if parsed is None:
            raise ValidationError(f"Invalid tier: {tier!r}")
        prompts = [p for p in prompts if p.tier == parsed]
    if week is not None:
        if not is_valid_week(week):
            raise ValidationError(f"Week number must be an integer between 1 and {TOTAL_WEEKS}")
        prompts = [p for p in prompts if p.week == week]
    return [weekly_prompt_response(p) for p in prompts]


@weekly_routes.get(
    "/weekly-challenge",
    response_model=WeeklyChallengeStatusResponse,
    response_model_exclude_none=True,
)
async def get_weekly_challenge(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> WeeklyChallengeStatusResponse:
    progress = CompletionService(db).get_weekly_progress(current_user.id)
    if progress is None:
        return WeeklyChallengeStatusResponse(status="not_started")
    return WeeklyChallengeStatusResponse(status="in_progress", progress=weekly_progress_response(progress))


@weekly_routes.post(
    "/weekly-challenge",
    response_model=WeeklyProgressResponse,
    status_code=status.HTTP_201_CREATED,
)
async def start_weekly_challenge(
    body: StartWeeklyChallengeRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> WeeklyProgressResponse:
    """Enroll in a tier. 409 if the user already has an enrollment."""
    progress = CompletionService(db).start_weekly_challenge(current_user.id, body.tier)
    return weekly_progress_response(progress)


@weekly_routes.post("/weekly-challenge/complete", response_model=WeeklyProgressResponse)
async def complete_weekly_prompt(
    body: CompletePromptRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> WeeklyProgressResponse:
    progress = CompletionService(db).complete_weekly_prompt(current_user.id, body.prompt_id)
    return weekly_progress_response(progress)


@weekly_routes.get("/weekly-challenge/summary", response_model=WeeklySummaryResponse)
async def get_weekly_summary(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> WeeklySummaryResponse:
    """Current week, percentage and per-week counts/lock states for the challenge page."""
    progress = CompletionService(db).get_weekly_progress(current_user.id)
    if progress is None:
        raise StateError("User has not started a weekly challenge")
    badges = BadgeAwardService(db).list_weekly_badges(current_user.id)
    return build_weekly_summary(progress, badges, mode=settings.weekly_unlock_mode)


@weekly_routes.get("/weekly-badges", response_model=list[WeeklyBadgeResponse])
async def get_weekly_badges(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[WeeklyBadgeResponse]:
    badges = BadgeAwardService(db).list_weekly_badges(current_user.id)
    return [weekly_badge_response(b) for b in badges]


@weekly_routes.post(
    "/weekly-badges/award",
    response_model=WeeklyBadgeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def award_weekly_badge(
    body: WeeklyBadgeRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> WeeklyBadgeResponse:
    badge = BadgeAwardService(db).award_weekly_badge(current_user.id, body.tier, body.week_number)
    return weekly_badge_response(badge, newly_awarded=True)


@weekly_routes.post("/weekly-badges/check-and-award", response_model=WeeklyBadgeResponse)
async def check_and_award_weekly_badge(
    body: WeeklyBadgeRequest,
    response: Response,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> WeeklyBadgeResponse:
    """201 with a newly awarded badge, 200 with an existing one."""
    badge, created = BadgeAwardService(db).check_and_award_weekly_badge(
        current_user.id, body.tier, body.week_number
    )
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return weekly_badge_response(badge, newly_awarded=created)
