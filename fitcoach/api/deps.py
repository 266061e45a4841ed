"""Shared FastAPI dependencies: repositories, coach service, synonym table."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fitcoach.core.config import get_settings
from fitcoach.core.constants import USER_ID
from fitcoach.db.session import get_db
from fitcoach.repositories import (
    ChatHistoryRepository,
    ExerciseRepository,
    PlanRepository,
    WorkoutRepository,
)
from fitcoach.services.coach import CoachService
from fitcoach.services.gemini import GeminiClient
from fitcoach.services.name_matching import SynonymTable, load_synonyms


def get_workout_repository(db: AsyncSession = Depends(get_db)) -> WorkoutRepository:
    return WorkoutRepository(db)


def get_exercise_repository(db: AsyncSession = Depends(get_db)) -> ExerciseRepository:
    return ExerciseRepository(db)


def get_plan_repository(db: AsyncSession = Depends(get_db)) -> PlanRepository:
    return PlanRepository(db)


def get_chat_repository(db: AsyncSession = Depends(get_db)) -> ChatHistoryRepository:
    return ChatHistoryRepository(db, USER_ID)


def get_synonyms() -> SynonymTable:
    return load_synonyms(get_settings().synonyms_path)


def get_coach_service() -> CoachService:
    return CoachService(GeminiClient(get_settings()))
