"""Workout plan: a multi-week programme with exercises laid out per training day."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fitcoach.db.base import Base


class WorkoutPlan(Base):
    __tablename__ = "workout_plans"
    __table_args__ = (
        Index("ix_workout_plans_user_created", "user_id", "created_at"),
        CheckConstraint("duration_weeks > 0", name="ck_workout_plans_duration_positive"),
        CheckConstraint("sessions_per_week BETWEEN 1 AND 7", name="ck_workout_plans_sessions_range"),
    )

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    difficulty: Mapped[str] = mapped_column(String(50), nullable=False, default="beginner")
    duration_weeks: Mapped[int] = mapped_column(Integer, nullable=False, default=4)
    sessions_per_week: Mapped[int] = mapped_column(Integer, nullable=False, default=3)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    exercises: Mapped[list["WorkoutPlanExercise"]] = relationship(
        "WorkoutPlanExercise",
        back_populates="plan",
        cascade="all, delete-orphan",
        order_by=lambda: [WorkoutPlanExercise.day_number, WorkoutPlanExercise.order_index],
    )


class WorkoutPlanExercise(Base):
    """One prescribed exercise on a plan day. reps is text so ranges like "8-12" fit."""

    __tablename__ = "workout_plan_exercises"
    __table_args__ = (
        Index("ix_workout_plan_exercises_plan_id", "plan_id"),
        CheckConstraint("day_number > 0", name="ck_workout_plan_exercises_day_positive"),
        CheckConstraint("sets > 0", name="ck_workout_plan_exercises_sets_positive"),
    )

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    plan_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("workout_plans.id", ondelete="CASCADE"), nullable=False
    )
    day_number: Mapped[int] = mapped_column(Integer, nullable=False)
    exercise_name: Mapped[str] = mapped_column(String(255), nullable=False)
    sets: Mapped[int] = mapped_column(Integer, nullable=False)
    reps: Mapped[str] = mapped_column(String(20), nullable=False)
    rest_seconds: Mapped[int] = mapped_column(Integer, nullable=False, default=90)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    order_index: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    plan: Mapped["WorkoutPlan"] = relationship("WorkoutPlan", back_populates="exercises")
