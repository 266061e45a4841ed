"""Workout sessions and sets: queries plus ORM row -> typed record mapping."""

from __future__ import annotations

import uuid
from collections.abc import Sequence
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fitcoach.models.workout import WorkoutSession, WorkoutSet
from fitcoach.schemas.workout import (
    WorkoutSessionCreate,
    WorkoutSessionRecord,
    WorkoutSetCreate,
    WorkoutSetRecord,
)


def to_set_record(row: WorkoutSet, session_started_at: datetime) -> WorkoutSetRecord:
    """Validate one set row into the record the analytics engine consumes."""
    return WorkoutSetRecord(
        id=row.id,
        session_id=row.session_id,
        exercise_name=row.exercise_name,
        set_number=row.set_number,
        reps=int(row.reps),
        weight_kg=float(row.weight_kg or 0),
        rest_seconds=row.rest_seconds,
        rpe=row.rpe,
        notes=row.notes,
        created_at=row.created_at,
        session_started_at=session_started_at,
    )


class WorkoutRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    def _sets_with_start(self):
        return select(WorkoutSet, WorkoutSession.started_at).join(
            WorkoutSession, WorkoutSession.id == WorkoutSet.session_id
        )

    async def create_session(self, user_id: uuid.UUID, payload: WorkoutSessionCreate) -> WorkoutSessionRecord:
        session = WorkoutSession(user_id=user_id, **payload.model_dump())
        self.db.add(session)
        await self.db.flush()
        await self.db.refresh(session)
        return WorkoutSessionRecord.model_validate(session)

    async def get_session(self, user_id: uuid.UUID, session_id: uuid.UUID) -> WorkoutSessionRecord | None:
        result = await self.db.execute(
            select(WorkoutSession).where(
                WorkoutSession.id == session_id, WorkoutSession.user_id == user_id
            )
        )
        session = result.scalar_one_or_none()
        return WorkoutSessionRecord.model_validate(session) if session else None

    async def complete_session(
        self,
        user_id: uuid.UUID,
        session_id: uuid.UUID,
        total_duration_minutes: int,
    ) -> WorkoutSessionRecord | None:
        """Mark an open session completed. Returns None if missing or already completed."""
        result = await self.db.execute(
            select(WorkoutSession).where(
                WorkoutSession.id == session_id,
                WorkoutSession.user_id == user_id,
                WorkoutSession.completed_at.is_(None),
            )
        )
        session = result.scalar_one_or_none()
        if session is None:
            return None
        session.completed_at = datetime.now(timezone.utc)
        session.total_duration_minutes = total_duration_minutes
        await self.db.flush()
        await self.db.refresh(session)
        return WorkoutSessionRecord.model_validate(session)

    async def list_sessions(
        self,
        user_id: uuid.UUID,
        limit: int = 50,
        since: datetime | None = None,
    ) -> list[WorkoutSessionRecord]:
        """Most recent sessions first."""
        stmt = select(WorkoutSession).where(WorkoutSession.user_id == user_id)
        if since is not None:
            stmt = stmt.where(WorkoutSession.started_at >= since)
        stmt = stmt.order_by(WorkoutSession.started_at.desc()).limit(limit)
        result = await self.db.execute(stmt)
        return [WorkoutSessionRecord.model_validate(s) for s in result.scalars().all()]

    async def add_set(self, session: WorkoutSessionRecord, payload: WorkoutSetCreate) -> WorkoutSetRecord:
        set_ = WorkoutSet(session_id=session.id, **payload.model_dump())
        self.db.add(set_)
        await self.db.flush()
        await self.db.refresh(set_)
        return to_set_record(set_, session.started_at)

    async def session_sets(self, session: WorkoutSessionRecord) -> list[WorkoutSetRecord]:
        result = await self.db.execute(
            select(WorkoutSet)
            .where(WorkoutSet.session_id == session.id)
            .order_by(WorkoutSet.created_at)
        )
        return [to_set_record(s, session.started_at) for s in result.scalars().all()]

    async def count_exercise_sets(self, session_id: uuid.UUID, exercise_name: str) -> int:
        result = await self.db.execute(
            select(WorkoutSet.id).where(
                WorkoutSet.session_id == session_id,
                WorkoutSet.exercise_name == exercise_name,
            )
        )
        return len(result.all())

    async def exercise_history(
        self,
        user_id: uuid.UUID,
        exercise_name: str,
        limit: int = 20,
    ) -> list[WorkoutSetRecord]:
        """Sets for one exercise, newest first."""
        result = await self.db.execute(
            self._sets_with_start()
            .where(WorkoutSession.user_id == user_id, WorkoutSet.exercise_name == exercise_name)
            .order_by(WorkoutSet.created_at.desc())
            .limit(limit)
        )
        return [to_set_record(s, started_at) for s, started_at in result.all()]

    async def sets_in_window(
        self,
        user_id: uuid.UUID,
        exercise_name: str,
        since: datetime,
    ) -> list[WorkoutSetRecord]:
        """Sets for one exercise whose session started at or after `since`, oldest session first."""
        result = await self.db.execute(
            self._sets_with_start()
            .where(
                WorkoutSession.user_id == user_id,
                WorkoutSet.exercise_name == exercise_name,
                WorkoutSession.started_at >= since,
            )
            .order_by(WorkoutSession.started_at, WorkoutSet.created_at)
        )
        return [to_set_record(s, started_at) for s, started_at in result.all()]

    async def sets_for_sessions(self, sessions: Sequence[WorkoutSessionRecord]) -> list[WorkoutSetRecord]:
        if not sessions:
            return []
        started = {s.id: s.started_at for s in sessions}
        result = await self.db.execute(
            select(WorkoutSet)
            .where(WorkoutSet.session_id.in_(list(started)))
            .order_by(WorkoutSet.created_at)
        )
        return [to_set_record(s, started[s.session_id]) for s in result.scalars().all()]
