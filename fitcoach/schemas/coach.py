"""AI coach schemas: recommendation contract and chat."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from fitcoach.core.enums import ChatRole, ConfidenceLevel


class Recommendation(BaseModel):
    """Next-set recommendation. camelCase aliases match the JSON the AI is asked to return."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    exercise_name: str
    suggested_weight: float = Field(..., ge=0)
    suggested_reps: str
    reasoning: str
    progress_notes: str
    motivational_message: str
    confidence_level: ConfidenceLevel = ConfidenceLevel.LOW

    @field_validator("suggested_reps", mode="before")
    @classmethod
    def _reps_as_text(cls, v):
        # The AI may answer a single number instead of a range
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return f"{v:g}"
        return v


class ProgressAnalysisRead(BaseModel):
    exercise_name: str
    analysis: str


class ChatMessageRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    role: ChatRole
    message: str
    created_at: datetime


class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1, max_length=4000)


class ChatReply(BaseModel):
    message: str
    created_at: datetime
