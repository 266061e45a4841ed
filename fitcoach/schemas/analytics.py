"""Derived analytics schemas (computed on request, never persisted)."""

from pydantic import BaseModel, ConfigDict

from fitcoach.schemas.workout import WorkoutSetRecord


class ProgressAnalytics(BaseModel):
    model_config = ConfigDict(frozen=True)

    exercise_name: str
    total_sets: int
    max_weight: float
    max_reps: int
    total_volume: float
    avg_rpe: float | None = None
    weight_trend: float
    recent_sets: list[WorkoutSetRecord]
    workout_frequency: int


class WorkoutSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_sessions: int
    avg_duration_minutes: int
    top_exercises: list[str]
