"""Coaching collaborator exceptions."""


class CoachServiceError(Exception):
    """Base exception for AI coaching errors."""
    pass


class AIServiceUnavailableError(CoachServiceError):
    """Raised when the generative-language API cannot be reached or refuses the call."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedRecommendationError(CoachServiceError):
    """Raised when the AI reply is not a recommendation JSON object."""
    pass
