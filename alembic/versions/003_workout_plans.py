"""Workout plans and their exercises.

Revision ID: 003
Revises: 002
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "workout_plans",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("difficulty", sa.String(length=50), server_default="beginner", nullable=False),
        sa.Column("duration_weeks", sa.Integer(), server_default="4", nullable=False),
        sa.Column("sessions_per_week", sa.Integer(), server_default="3", nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint("duration_weeks > 0", name="ck_workout_plans_duration_positive"),
        sa.CheckConstraint("sessions_per_week BETWEEN 1 AND 7", name="ck_workout_plans_sessions_range"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_workout_plans_user_created", "workout_plans", ["user_id", "created_at"], unique=False)

    op.create_table(
        "workout_plan_exercises",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("plan_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("day_number", sa.Integer(), nullable=False),
        sa.Column("exercise_name", sa.String(length=255), nullable=False),
        sa.Column("sets", sa.Integer(), nullable=False),
        sa.Column("reps", sa.String(length=20), nullable=False),
        sa.Column("rest_seconds", sa.Integer(), server_default="90", nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("order_index", sa.Integer(), server_default="0", nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint("day_number > 0", name="ck_workout_plan_exercises_day_positive"),
        sa.CheckConstraint("sets > 0", name="ck_workout_plan_exercises_sets_positive"),
        sa.ForeignKeyConstraint(["plan_id"], ["workout_plans.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_workout_plan_exercises_plan_id", "workout_plan_exercises", ["plan_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_workout_plan_exercises_plan_id", table_name="workout_plan_exercises")
    op.drop_table("workout_plan_exercises")
    op.drop_index("ix_workout_plans_user_created", table_name="workout_plans")
    op.drop_table("workout_plans")
