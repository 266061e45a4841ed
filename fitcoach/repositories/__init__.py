"""Repositories: own the queries and map ORM rows to typed records."""

from fitcoach.repositories.chat import ChatHistoryRepository
from fitcoach.repositories.exercises import ExerciseRepository
from fitcoach.repositories.plans import PlanRepository
from fitcoach.repositories.workouts import WorkoutRepository

__all__ = ["ChatHistoryRepository", "ExerciseRepository", "PlanRepository", "WorkoutRepository"]
