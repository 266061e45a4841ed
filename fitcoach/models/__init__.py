"""ORM models - import all so Base.metadata is complete for migrations."""

from fitcoach.models.chat import ChatMessage
from fitcoach.models.exercise import Exercise, ExerciseMedia
from fitcoach.models.plan import WorkoutPlan, WorkoutPlanExercise
from fitcoach.models.workout import WorkoutSession, WorkoutSet

__all__ = [
    "ChatMessage",
    "Exercise",
    "ExerciseMedia",
    "WorkoutPlan",
    "WorkoutPlanExercise",
    "WorkoutSession",
    "WorkoutSet",
]
