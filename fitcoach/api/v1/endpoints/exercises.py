"""Exercise library endpoints: catalog, name resolution, media and set history."""

from fastapi import APIRouter, Depends, HTTPException, Query

from fitcoach.api.deps import get_exercise_repository, get_synonyms, get_workout_repository
from fitcoach.core.constants import USER_ID
from fitcoach.repositories import ExerciseRepository, WorkoutRepository
from fitcoach.schemas.exercise import (
    ExerciseCreate,
    ExerciseMediaRead,
    ExerciseRead,
    MatchRead,
    ResolveRead,
)
from fitcoach.schemas.workout import WorkoutSetRecord
from fitcoach.services.name_matching import SynonymTable, find_matches

router = APIRouter()


@router.get("", response_model=list[ExerciseRead])
async def list_exercises(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    repo: ExerciseRepository = Depends(get_exercise_repository),
):
    """List catalog entries ordered by name."""
    return await repo.list_catalog(skip=skip, limit=limit)


@router.post("", response_model=ExerciseRead, status_code=201)
async def create_exercise(
    payload: ExerciseCreate,
    repo: ExerciseRepository = Depends(get_exercise_repository),
):
    """Add a catalog entry. Names are unique."""
    if await repo.get_by_name(payload.name) is not None:
        raise HTTPException(status_code=409, detail="Exercise already exists")
    return await repo.create_entry(payload)


@router.get("/resolve", response_model=ResolveRead)
async def resolve_exercise(
    name: str = Query(..., min_length=1),
    repo: ExerciseRepository = Depends(get_exercise_repository),
    synonyms: SynonymTable = Depends(get_synonyms),
):
    """Map a free-text exercise name to the closest catalog name (null when nothing is close)."""
    matches = find_matches(name, await repo.catalog_names(), synonyms)
    return ResolveRead(
        search_name=name,
        resolved_name=matches[0].candidate_name if matches else None,
        matches=[MatchRead(candidate_name=m.candidate_name, score=round(m.score, 1)) for m in matches],
    )


@router.get("/media", response_model=list[ExerciseMediaRead])
async def exercise_media(
    name: str = Query(..., min_length=1),
    repo: ExerciseRepository = Depends(get_exercise_repository),
    synonyms: SynonymTable = Depends(get_synonyms),
):
    """Images/videos for an exercise; falls back to fuzzy matching; empty list when none."""
    return await repo.media_for(name, synonyms)


@router.get("/history", response_model=list[WorkoutSetRecord])
async def exercise_history(
    name: str = Query(..., min_length=1),
    limit: int = Query(20, ge=1, le=200),
    repo: WorkoutRepository = Depends(get_workout_repository),
):
    """Logged sets for an exercise, newest first."""
    return await repo.exercise_history(USER_ID, name, limit=limit)
