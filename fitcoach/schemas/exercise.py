"""Exercise catalog and media schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from fitcoach.core.enums import MediaType


class ExerciseBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    category: str = Field(..., min_length=1, max_length=100)
    primary_muscles: list[str] = []
    secondary_muscles: list[str] = []
    rest_time: int = Field(90, ge=0, description="Rest between sets in seconds")
    instructions: list[str] = []
    tips: list[str] = []


class ExerciseCreate(ExerciseBase):
    pass


class ExerciseRead(ExerciseBase):
    model_config = ConfigDict(from_attributes=True, frozen=True)
    id: UUID


class ExerciseMediaRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    exercise_name: str
    media_type: MediaType
    url: str
    description: str | None = None
    created_at: datetime


class MatchRead(BaseModel):
    candidate_name: str
    score: float


class ResolveRead(BaseModel):
    """Resolution of a free-text name: best canonical name (or null) plus the ranked candidates."""

    search_name: str
    resolved_name: str | None = None
    matches: list[MatchRead] = []
