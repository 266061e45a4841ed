"""AI coach endpoints: recommendation, progress analysis, chat."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from fitcoach.api.deps import get_chat_repository, get_coach_service, get_workout_repository
from fitcoach.api.v1.endpoints.analytics import load_progress
from fitcoach.core.config import get_settings
from fitcoach.core.constants import COACH_HISTORY_LIMIT, USER_ID
from fitcoach.core.enums import ChatRole
from fitcoach.core.exceptions import AIServiceUnavailableError
from fitcoach.repositories import ChatHistoryRepository, WorkoutRepository
from fitcoach.schemas.coach import (
    ChatMessageRead,
    ChatReply,
    ChatRequest,
    ProgressAnalysisRead,
    Recommendation,
)
from fitcoach.services.coach import CoachService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/recommendation", response_model=Recommendation)
async def recommendation(
    exercise_name: str = Query(..., min_length=1),
    repo: WorkoutRepository = Depends(get_workout_repository),
    coach: CoachService = Depends(get_coach_service),
):
    """Next-set suggestion from the AI coach, or a locally derived one if the AI fails."""
    history = await repo.exercise_history(USER_ID, exercise_name, limit=COACH_HISTORY_LIMIT)
    analytics = await load_progress(repo, exercise_name, get_settings().analytics_default_days)
    return await coach.recommend(exercise_name, history, analytics)


@router.get("/progress-analysis", response_model=ProgressAnalysisRead)
async def progress_analysis(
    exercise_name: str = Query(..., min_length=1),
    repo: WorkoutRepository = Depends(get_workout_repository),
    coach: CoachService = Depends(get_coach_service),
):
    """Free-form progress analysis text (never an error; failures become a message)."""
    analytics = await load_progress(repo, exercise_name, get_settings().analytics_default_days)
    text = await coach.analyze_progress(exercise_name, analytics)
    return ProgressAnalysisRead(exercise_name=exercise_name, analysis=text)


@router.get("/chat/history", response_model=list[ChatMessageRead])
async def chat_history(chat_repo: ChatHistoryRepository = Depends(get_chat_repository)):
    return await chat_repo.load()


@router.delete("/chat/history", response_model=list[ChatMessageRead])
async def clear_chat_history(chat_repo: ChatHistoryRepository = Depends(get_chat_repository)):
    """Reset the conversation to the greeting."""
    return await chat_repo.clear()


@router.post("/chat", response_model=ChatReply)
async def chat(
    payload: ChatRequest,
    chat_repo: ChatHistoryRepository = Depends(get_chat_repository),
    coach: CoachService = Depends(get_coach_service),
):
    """Send a message to the coach. Both turns are stored; 503 if the AI is unavailable."""
    history = await chat_repo.load()
    try:
        reply = await coach.chat(payload.message, history)
    except AIServiceUnavailableError as e:
        logger.warning("Coach chat failed: %s", e)
        raise HTTPException(
            status_code=503,
            detail="The coach is unavailable right now. Please try again.",
        ) from e
    await chat_repo.append(ChatRole.USER, payload.message)
    saved = await chat_repo.append(ChatRole.AI, reply)
    return ChatReply(message=saved.message, created_at=saved.created_at)
