"""Recommendation helpers: parse the AI reply, or derive one locally from the last set."""

from __future__ import annotations

import json
import re

from pydantic import ValidationError

from fitcoach.core.constants import (
    FALLBACK_MIN_REPS,
    FALLBACK_RPE_THRESHOLD,
    FALLBACK_WEIGHT_INCREMENT_KG,
    STARTER_REP_RANGE,
    STARTER_WEIGHT_KG,
)
from fitcoach.core.enums import ConfidenceLevel
from fitcoach.core.exceptions import MalformedRecommendationError
from fitcoach.schemas.coach import Recommendation
from fitcoach.schemas.workout import WorkoutSetRecord

# Models often wrap JSON in a ```json fenced block
_FENCED_JSON = re.compile(r"```(?:json)?\s*(\{.*\})\s*```", re.DOTALL)


def confidence_level(history_length: int, workout_frequency: int) -> ConfidenceLevel:
    if history_length >= 8 and workout_frequency >= 3:
        return ConfidenceLevel.HIGH
    if history_length >= 4 and workout_frequency >= 2:
        return ConfidenceLevel.MEDIUM
    return ConfidenceLevel.LOW


def starter_recommendation(exercise_name: str) -> Recommendation:
    """Recommendation for an exercise with no logged history."""
    return Recommendation(
        exercise_name=exercise_name,
        suggested_weight=STARTER_WEIGHT_KG,
        suggested_reps=STARTER_REP_RANGE,
        reasoning="No previous history. Start with a moderate weight to establish a baseline.",
        progress_notes="First time logging this exercise",
        motivational_message="Great time to start! Consistency is the key to progress.",
        confidence_level=ConfidenceLevel.LOW,
    )


def fallback_recommendation(exercise_name: str, last_set: WorkoutSetRecord) -> Recommendation:
    """
    Local recommendation from the most recent set: add a fixed increment when the
    set had RPE <= 7, otherwise hold the weight; reps widen by one either side.
    """
    room_to_grow = last_set.rpe is not None and last_set.rpe <= FALLBACK_RPE_THRESHOLD
    weight = last_set.weight_kg + FALLBACK_WEIGHT_INCREMENT_KG if room_to_grow else last_set.weight_kg
    low = max(FALLBACK_MIN_REPS, last_set.reps - 1)
    high = last_set.reps + 1

    rpe_note = f" (RPE {last_set.rpe})" if last_set.rpe is not None else ""
    advice = "You can try more weight." if room_to_grow else "Keep the current weight."
    return Recommendation(
        exercise_name=exercise_name,
        suggested_weight=weight,
        suggested_reps=f"{low}-{high}",
        reasoning=f"Based on your last set of {last_set.reps} reps x {last_set.weight_kg:g}kg{rpe_note}. {advice}",
        progress_notes="Recommendation based on your last workout",
        motivational_message="Great progress! Keep building on what you've achieved.",
        confidence_level=ConfidenceLevel.MEDIUM,
    )


def parse_recommendation(text: str, exercise_name: str) -> Recommendation:
    """Parse the AI reply as a Recommendation; raises MalformedRecommendationError."""
    fenced = _FENCED_JSON.search(text)
    raw = fenced.group(1) if fenced else text.strip()
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedRecommendationError(f"AI reply is not JSON: {e}") from e
    if not isinstance(data, dict):
        raise MalformedRecommendationError("AI reply is not a JSON object")
    # Name and confidence come from the request and local history, never from the AI
    data.pop("exercise_name", None)
    data["exerciseName"] = exercise_name
    data.pop("confidenceLevel", None)
    data.pop("confidence_level", None)
    try:
        return Recommendation.model_validate(data)
    except ValidationError as e:
        raise MalformedRecommendationError(f"AI reply does not match the recommendation shape: {e}") from e
