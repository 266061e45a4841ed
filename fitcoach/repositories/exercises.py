"""Exercise catalog and media lookups."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fitcoach.models.exercise import Exercise, ExerciseMedia
from fitcoach.schemas.exercise import ExerciseCreate, ExerciseMediaRead, ExerciseRead
from fitcoach.services.name_matching import SynonymTable, resolve_exercise_name

logger = logging.getLogger(__name__)


class ExerciseRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_catalog(self, skip: int = 0, limit: int = 100) -> list[ExerciseRead]:
        result = await self.db.execute(
            select(Exercise).order_by(Exercise.name).offset(skip).limit(limit)
        )
        return [ExerciseRead.model_validate(e) for e in result.scalars().all()]

    async def catalog_names(self) -> list[str]:
        result = await self.db.execute(select(Exercise.name).order_by(Exercise.name))
        return list(result.scalars().all())

    async def get_by_name(self, name: str) -> ExerciseRead | None:
        result = await self.db.execute(select(Exercise).where(Exercise.name == name))
        exercise = result.scalar_one_or_none()
        return ExerciseRead.model_validate(exercise) if exercise else None

    async def create_entry(self, payload: ExerciseCreate) -> ExerciseRead:
        exercise = Exercise(**payload.model_dump())
        self.db.add(exercise)
        await self.db.flush()
        await self.db.refresh(exercise)
        return ExerciseRead.model_validate(exercise)

    async def _media_named(self, name: str) -> list[ExerciseMediaRead]:
        result = await self.db.execute(
            select(ExerciseMedia)
            .where(ExerciseMedia.exercise_name == name)
            .order_by(ExerciseMedia.created_at.desc())
        )
        return [ExerciseMediaRead.model_validate(m) for m in result.scalars().all()]

    async def media_names(self) -> list[str]:
        result = await self.db.execute(
            select(ExerciseMedia.exercise_name).distinct().order_by(ExerciseMedia.exercise_name)
        )
        return list(result.scalars().all())

    async def media_for(self, name: str, synonyms: SynonymTable | None = None) -> list[ExerciseMediaRead]:
        """
        Media for an exercise: exact name first, otherwise the best fuzzy match among
        names present in the media library. Empty list when nothing matches.
        """
        media = await self._media_named(name)
        if media:
            return media

        best = resolve_exercise_name(name, await self.media_names(), synonyms)
        if best is None:
            logger.info("No media for exercise %r", name)
            return []
        return await self._media_named(best)
