"""
Free practice endpoints: prompts, recording feedback, sessions and prompt completions.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from sqlalchemy.orm import Session

from cringeshield.config import get_db
from cringeshield.models.models import PracticeSession, PromptCompletion, User
from cringeshield.schemas.practice_schemas import (
    CreatePracticeSessionRequest,
    CreatePromptCompletionRequest,
    FeedbackResponse,
    PracticeSessionResponse,
    PromptCompletionResponse,
    SpeakingPromptResponse,
)
from cringeshield.services.practice_service import PracticeService
from cringeshield.utils.auth import get_current_user
from cringeshield.utils.common import iso_format

practice_routes = APIRouter()


def session_response(s: PracticeSession) -> PracticeSessionResponse:
    return PracticeSessionResponse(
        id=s.id,
        user_id=s.user_id,
        date=iso_format(s.date),
        duration=s.duration,
        prompt_category=s.prompt_category,
        prompt=s.prompt,
        filter=s.filter,
        confidence_score=s.confidence_score,
        user_rating=s.user_rating,
        notes=s.notes,
        camera_on=bool(s.camera_on),
    )


def completion_response(c: PromptCompletion) -> PromptCompletionResponse:
    return PromptCompletionResponse(
        id=c.id,
        user_id=c.user_id,
        prompt_text=c.prompt_text,
        category=c.category,
        completed_at=iso_format(c.completed_at),
    )


@practice_routes.get("/prompts/generate", response_model=SpeakingPromptResponse)
async def generate_prompt(
    category: Optional[str] = Query("random"),
    db: Session = Depends(get_db),
) -> SpeakingPromptResponse:
    """Random prompt from a category ("random" draws from every category)."""
    prompt = PracticeService(db).random_prompt(category)
    return SpeakingPromptResponse(id=prompt.id, category=prompt.category, text=prompt.text)


@practice_routes.post("/feedback/analyze", response_model=FeedbackResponse)
async def analyze_feedback(
    recording: Optional[UploadFile] = File(None),
    prompt: str = Form(""),
    db: Session = Depends(get_db),
) -> FeedbackResponse:
    """Coaching feedback for an uploaded recording (multipart field `recording`)."""
    data = await recording.read() if recording is not None else b""
    return PracticeService(db).analyze_feedback(data, prompt)


@practice_routes.get("/sessions", response_model=list[PracticeSessionResponse])
async def list_sessions(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[PracticeSessionResponse]:
    return [session_response(s) for s in PracticeService(db).list_sessions(current_user.id)]


@practice_routes.post("/sessions", response_model=PracticeSessionResponse, status_code=status.HTTP_201_CREATED)
async def create_session(
    body: CreatePracticeSessionRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> PracticeSessionResponse:
    return session_response(PracticeService(db).create_session(current_user.id, body))


@practice_routes.get("/prompt-completions", response_model=list[PromptCompletionResponse])
async def list_prompt_completions(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[PromptCompletionResponse]:
    return [completion_response(c) for c in PracticeService(db).list_completions(current_user.id)]


@practice_routes.post(
    "/prompt-completions",
    response_model=PromptCompletionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_prompt_completion(
    body: CreatePromptCompletionRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> PromptCompletionResponse:
    completion = PracticeService(db).create_completion(current_user.id, body.prompt_text, body.category)
    return completion_response(completion)
