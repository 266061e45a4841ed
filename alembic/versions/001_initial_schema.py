"""Initial schema: workout sessions, sets, exercise catalog and media.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("CREATE TYPE mediatype AS ENUM ('IMAGE', 'VIDEO')")

    op.create_table(
        "workout_sessions",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("workout_name", sa.String(length=255), nullable=False),
        sa.Column("started_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("total_duration_minutes", sa.Integer(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_workout_sessions_user_started", "workout_sessions", ["user_id", "started_at"], unique=False)

    op.create_table(
        "workout_sets",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("session_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("exercise_name", sa.String(length=255), nullable=False),
        sa.Column("set_number", sa.Integer(), nullable=False),
        sa.Column("reps", sa.Integer(), nullable=False),
        sa.Column("weight_kg", sa.Numeric(precision=8, scale=2), nullable=False, server_default="0"),
        sa.Column("rest_seconds", sa.Integer(), nullable=True),
        sa.Column("rpe", sa.Integer(), nullable=True),
        sa.Column("notes", sa.String(length=500), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(["session_id"], ["workout_sessions.id"], ondelete="CASCADE"),
        sa.CheckConstraint("set_number > 0", name="ck_workout_sets_set_number_positive"),
        sa.CheckConstraint("reps > 0", name="ck_workout_sets_reps_positive"),
        sa.CheckConstraint("weight_kg >= 0", name="ck_workout_sets_weight_non_negative"),
        sa.CheckConstraint("rpe IS NULL OR (rpe BETWEEN 1 AND 10)", name="ck_workout_sets_rpe_range"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_workout_sets_session_id", "workout_sets", ["session_id"], unique=False)
    op.create_index("ix_workout_sets_exercise_name", "workout_sets", ["exercise_name"], unique=False)

    op.create_table(
        "exercises",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("category", sa.String(length=100), nullable=False),
        sa.Column("primary_muscles", postgresql.JSONB(), nullable=False, server_default="[]"),
        sa.Column("secondary_muscles", postgresql.JSONB(), nullable=False, server_default="[]"),
        sa.Column("rest_time", sa.Integer(), nullable=False, server_default="90"),
        sa.Column("instructions", postgresql.JSONB(), nullable=False, server_default="[]"),
        sa.Column("tips", postgresql.JSONB(), nullable=False, server_default="[]"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_exercises_name"), "exercises", ["name"], unique=True)

    op.create_table(
        "exercise_media",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("exercise_name", sa.String(length=255), nullable=False),
        sa.Column("media_type", sa.Enum("IMAGE", "VIDEO", name="mediatype", create_type=False), nullable=False),
        sa.Column("url", sa.String(length=1000), nullable=False),
        sa.Column("description", sa.String(length=1000), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_exercise_media_exercise_name"), "exercise_media", ["exercise_name"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_exercise_media_exercise_name"), table_name="exercise_media")
    op.drop_table("exercise_media")
    op.drop_index(op.f("ix_exercises_name"), table_name="exercises")
    op.drop_table("exercises")
    op.drop_index("ix_workout_sets_exercise_name", table_name="workout_sets")
    op.drop_index("ix_workout_sets_session_id", table_name="workout_sets")
    op.drop_table("workout_sets")
    op.drop_index("ix_workout_sessions_user_started", table_name="workout_sessions")
    op.drop_table("workout_sessions")
    op.execute("DROP TYPE IF EXISTS mediatype")
