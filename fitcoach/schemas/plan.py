"""Workout plan schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class PlanExerciseBase(BaseModel):
    day_number: int = Field(..., gt=0)
    exercise_name: str = Field(..., min_length=1, max_length=255)
    sets: int = Field(..., gt=0)
    reps: str = Field(..., min_length=1, max_length=20, description='Count or range, e.g. "10" or "8-12"')
    rest_seconds: int = Field(90, ge=0)
    notes: str | None = None
    order_index: int = Field(0, ge=0)


class PlanExerciseCreate(PlanExerciseBase):
    pass


class PlanExerciseRead(PlanExerciseBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID


class WorkoutPlanBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    difficulty: str = Field("beginner", min_length=1, max_length=50)
    duration_weeks: int = Field(4, gt=0, le=104)
    sessions_per_week: int = Field(3, ge=1, le=7)


class WorkoutPlanCreate(WorkoutPlanBase):
    exercises: list[PlanExerciseCreate] = []


class WorkoutPlanRead(WorkoutPlanBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    created_at: datetime
    exercises: list[PlanExerciseRead] = []
