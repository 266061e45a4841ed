"""Progress analytics endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from fitcoach.api.deps import get_workout_repository
from fitcoach.core.config import get_settings
from fitcoach.core.constants import USER_ID
from fitcoach.repositories import WorkoutRepository
from fitcoach.schemas.analytics import ProgressAnalytics, WorkoutSummary
from fitcoach.services.progress_analytics import (
    compute_progress_analytics,
    summarize_sessions,
    window_start,
)

router = APIRouter()


async def load_progress(
    repo: WorkoutRepository,
    exercise_name: str,
    days: int,
) -> ProgressAnalytics | None:
    sets = await repo.sets_in_window(USER_ID, exercise_name, window_start(days))
    return compute_progress_analytics(exercise_name, sets)


@router.get("/progress", response_model=ProgressAnalytics | None)
async def progress(
    exercise_name: str = Query(..., min_length=1),
    days: int | None = Query(None, ge=1, le=3650),
    repo: WorkoutRepository = Depends(get_workout_repository),
):
    """
    Trend metrics for one exercise over the trailing window (default from settings).
    Returns null when there are no sets in the window.
    """
    return await load_progress(repo, exercise_name, days or get_settings().analytics_default_days)


@router.get("/summary", response_model=WorkoutSummary | None)
async def summary(
    limit: int = Query(30, ge=1, le=200),
    repo: WorkoutRepository = Depends(get_workout_repository),
):
    """Overview of the last `limit` sessions: count, average duration, most-logged exercises."""
    sessions = await repo.list_sessions(USER_ID, limit=limit)
    sets = await repo.sets_for_sessions(sessions)
    return summarize_sessions(sessions, sets)
