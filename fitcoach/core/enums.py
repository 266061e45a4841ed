"""Shared enums for models and API."""

from enum import Enum


class MediaType(str, Enum):
    """Kind of instructional media attached to an exercise."""

    IMAGE = "image"
    VIDEO = "video"


class ChatRole(str, Enum):
    """Author of a coach chat message."""

    USER = "user"
    AI = "ai"


class ConfidenceLevel(str, Enum):
    """How much history backs a recommendation."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
