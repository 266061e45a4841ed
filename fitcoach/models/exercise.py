"""Exercise catalog and media models."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Enum, Integer, String
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column

from fitcoach.core.enums import MediaType
from fitcoach.db.base import Base


class Exercise(Base):
    """Catalog entry: canonical name plus muscles, rest time and coaching text. Reference data."""

    __tablename__ = "exercises"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    primary_muscles: Mapped[list[str]] = mapped_column(JSONB, nullable=False, default=list)
    secondary_muscles: Mapped[list[str]] = mapped_column(JSONB, nullable=False, default=list)
    rest_time: Mapped[int] = mapped_column(Integer, nullable=False, default=90)  # seconds
    instructions: Mapped[list[str]] = mapped_column(JSONB, nullable=False, default=list)
    tips: Mapped[list[str]] = mapped_column(JSONB, nullable=False, default=list)


class ExerciseMedia(Base):
    """Image or video for an exercise, keyed by the media library's own exercise name."""

    __tablename__ = "exercise_media"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    exercise_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    media_type: Mapped[MediaType] = mapped_column(Enum(MediaType), nullable=False)
    url: Mapped[str] = mapped_column(String(1000), nullable=False)
    description: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
