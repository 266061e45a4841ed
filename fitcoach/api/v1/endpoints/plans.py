"""Workout plan endpoints."""

from fastapi import APIRouter, Depends, Query

from fitcoach.api.deps import get_plan_repository
from fitcoach.core.constants import USER_ID
from fitcoach.repositories import PlanRepository
from fitcoach.schemas.plan import WorkoutPlanCreate, WorkoutPlanRead

router = APIRouter()


@router.get("", response_model=list[WorkoutPlanRead])
async def list_plans(
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
    repo: PlanRepository = Depends(get_plan_repository),
):
    """Saved plans, newest first."""
    return await repo.list_plans(USER_ID, skip=skip, limit=limit)


@router.post("", response_model=WorkoutPlanRead, status_code=201)
async def create_plan(
    payload: WorkoutPlanCreate,
    repo: PlanRepository = Depends(get_plan_repository),
):
    """Create a plan together with its exercises."""
    return await repo.create_plan(USER_ID, payload)
