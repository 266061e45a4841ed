"""WorkoutSession and WorkoutSet schemas.

`WorkoutSetRecord` / `WorkoutSessionRecord` are the typed records handed to the
analytics and coaching services; repositories build them from ORM rows.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class WorkoutSessionCreate(BaseModel):
    workout_name: str = Field(..., min_length=1, max_length=255)
    notes: str | None = None


class WorkoutSessionComplete(BaseModel):
    total_duration_minutes: int = Field(..., ge=0)


class WorkoutSessionRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: UUID
    workout_name: str
    started_at: datetime
    completed_at: datetime | None = None
    total_duration_minutes: int | None = None
    notes: str | None = None

    @property
    def is_completed(self) -> bool:
        return self.completed_at is not None


class WorkoutSetCreate(BaseModel):
    exercise_name: str = Field(..., min_length=1, max_length=255)
    set_number: int = Field(..., gt=0)
    reps: int = Field(..., gt=0)
    weight_kg: float = Field(0.0, ge=0)
    rest_seconds: int | None = Field(None, ge=0)
    rpe: int | None = Field(None, ge=1, le=10)
    notes: str | None = Field(None, max_length=500)


class WorkoutSetRecord(BaseModel):
    """A completed set joined with its parent session's start time."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: UUID
    session_id: UUID
    exercise_name: str
    set_number: int = Field(..., gt=0)
    reps: int = Field(..., gt=0)
    weight_kg: float = Field(..., ge=0)
    rest_seconds: int | None = None
    rpe: int | None = Field(None, ge=1, le=10)
    notes: str | None = None
    created_at: datetime
    session_started_at: datetime

    @property
    def volume(self) -> float:
        return self.weight_kg * self.reps
