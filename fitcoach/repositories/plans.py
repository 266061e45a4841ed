"""Workout plan persistence."""

from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from fitcoach.models.plan import WorkoutPlan, WorkoutPlanExercise
from fitcoach.schemas.plan import WorkoutPlanCreate, WorkoutPlanRead


class PlanRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    def _plans(self):
        return select(WorkoutPlan).options(selectinload(WorkoutPlan.exercises))

    async def create_plan(self, user_id: uuid.UUID, payload: WorkoutPlanCreate) -> WorkoutPlanRead:
        """Insert the plan and its exercises in one flush; the request transaction commits both or neither."""
        plan = WorkoutPlan(user_id=user_id, **payload.model_dump(exclude={"exercises"}))
        plan.exercises = [WorkoutPlanExercise(**e.model_dump()) for e in payload.exercises]
        self.db.add(plan)
        await self.db.flush()
        result = await self.db.execute(self._plans().where(WorkoutPlan.id == plan.id))
        return WorkoutPlanRead.model_validate(result.scalar_one())

    async def list_plans(self, user_id: uuid.UUID, skip: int = 0, limit: int = 50) -> list[WorkoutPlanRead]:
        """User's plans newest first, each with its exercises by day and order."""
        result = await self.db.execute(
            self._plans()
            .where(WorkoutPlan.user_id == user_id)
            .order_by(WorkoutPlan.created_at.desc())
            .offset(skip)
            .limit(limit)
        )
        return [WorkoutPlanRead.model_validate(p) for p in result.scalars().all()]
