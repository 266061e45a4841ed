"""Workout session and set endpoints."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query

from fitcoach.api.deps import get_workout_repository
from fitcoach.core.constants import MAX_SETS_PER_EXERCISE_PER_SESSION, USER_ID
from fitcoach.repositories import WorkoutRepository
from fitcoach.schemas.workout import (
    WorkoutSessionComplete,
    WorkoutSessionCreate,
    WorkoutSessionRecord,
    WorkoutSetCreate,
    WorkoutSetRecord,
)

router = APIRouter()


async def _session_or_404(repo: WorkoutRepository, session_id: uuid.UUID) -> WorkoutSessionRecord:
    session = await repo.get_session(USER_ID, session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Workout session not found")
    return session


@router.get("", response_model=list[WorkoutSessionRecord])
async def list_sessions(
    limit: int = Query(50, ge=1, le=200),
    repo: WorkoutRepository = Depends(get_workout_repository),
):
    """Most recent sessions first."""
    return await repo.list_sessions(USER_ID, limit=limit)


@router.post("", response_model=WorkoutSessionRecord, status_code=201)
async def start_session(
    payload: WorkoutSessionCreate,
    repo: WorkoutRepository = Depends(get_workout_repository),
):
    """Start a new workout session."""
    return await repo.create_session(USER_ID, payload)


@router.post("/{session_id}/complete", response_model=WorkoutSessionRecord)
async def complete_session(
    session_id: uuid.UUID,
    payload: WorkoutSessionComplete,
    repo: WorkoutRepository = Depends(get_workout_repository),
):
    """Mark a session completed with its total duration. A session can only be completed once."""
    session = await _session_or_404(repo, session_id)
    if session.is_completed:
        raise HTTPException(status_code=409, detail="Workout session already completed")
    completed = await repo.complete_session(USER_ID, session_id, payload.total_duration_minutes)
    if completed is None:
        raise HTTPException(status_code=409, detail="Workout session already completed")
    return completed


@router.get("/{session_id}/sets", response_model=list[WorkoutSetRecord])
async def list_session_sets(
    session_id: uuid.UUID,
    repo: WorkoutRepository = Depends(get_workout_repository),
):
    """Sets of a session in the order they were logged."""
    session = await _session_or_404(repo, session_id)
    return await repo.session_sets(session)


@router.post("/{session_id}/sets", response_model=WorkoutSetRecord, status_code=201)
async def add_set(
    session_id: uuid.UUID,
    payload: WorkoutSetCreate,
    repo: WorkoutRepository = Depends(get_workout_repository),
):
    """Log a completed set (max 10 sets per exercise per session)."""
    session = await _session_or_404(repo, session_id)
    if await repo.count_exercise_sets(session_id, payload.exercise_name) >= MAX_SETS_PER_EXERCISE_PER_SESSION:
        raise HTTPException(
            status_code=400,
            detail=f"Maximum {MAX_SETS_PER_EXERCISE_PER_SESSION} sets per exercise per session.",
        )
    return await repo.add_set(session, payload)
