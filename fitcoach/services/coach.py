"""AI coach: prompt building and the recommendation / analysis / chat flows.

The AI reply is never trusted blindly: a recommendation that fails to parse
falls back to the locally derived one, and analysis failures become a
readable message instead of an error.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from fitcoach.core.constants import COACH_PROMPT_SETS
from fitcoach.core.exceptions import CoachServiceError
from fitcoach.schemas.analytics import ProgressAnalytics
from fitcoach.schemas.coach import ChatMessageRead, Recommendation
from fitcoach.schemas.workout import WorkoutSetRecord
from fitcoach.services.gemini import GeminiClient
from fitcoach.services.recommendations import (
    confidence_level,
    fallback_recommendation,
    parse_recommendation,
    starter_recommendation,
)

logger = logging.getLogger(__name__)

CHAT_SYSTEM_PROMPT = """You are an AI personal trainer specialised in fitness and nutrition.
You have access to the user's progress data and give personalised advice.

Personality:
- Motivating and positive
- Grounded in science and evidence
- Adapts to every fitness level
- Focused on sustainable results
- Specialist in gym routines, calisthenics and nutrition

Keep a professional but friendly tone."""

NOT_ENOUGH_DATA = "Not enough data to analyse progress for this exercise yet."


def _format_set(s: WorkoutSetRecord) -> str:
    rpe = f" (RPE {s.rpe})" if s.rpe is not None else ""
    return f"{s.reps} reps x {s.weight_kg:g}kg{rpe}"


def _format_metrics(analytics: ProgressAnalytics) -> str:
    avg_rpe = f"{analytics.avg_rpe:.1f}/10" if analytics.avg_rpe is not None else "not recorded"
    return "\n".join([
        f"- Total sets: {analytics.total_sets}",
        f"- Max weight: {analytics.max_weight:g}kg",
        f"- Max reps: {analytics.max_reps}",
        f"- Total volume: {analytics.total_volume:g}kg",
        f"- Weight trend: {analytics.weight_trend:+.1f}kg",
        f"- Training days: {analytics.workout_frequency}",
        f"- Average RPE: {avg_rpe}",
    ])


def build_recommendation_prompt(
    exercise_name: str,
    history: Sequence[WorkoutSetRecord],
    analytics: ProgressAnalytics,
) -> str:
    recent = "\n".join(
        f"Set {i}: {_format_set(s)} - {s.created_at.date().isoformat()}"
        for i, s in enumerate(history[:COACH_PROMPT_SETS], start=1)
    )
    return f"""As an expert personal trainer, analyse the progress of this exercise and recommend the next set.

EXERCISE: {exercise_name}

RECENT HISTORY (newest first):
{recent}

PROGRESS (trailing window):
{_format_metrics(analytics)}

Reply ONLY with valid JSON in this shape:
{{
  "exerciseName": "{exercise_name}",
  "suggestedWeight": <number>,
  "suggestedReps": "<range such as '8-10' or a single number>",
  "reasoning": "<why these values>",
  "progressNotes": "<observations about the progress>",
  "motivationalMessage": "<short personalised message>"
}}"""


def build_progress_prompt(exercise_name: str, analytics: ProgressAnalytics) -> str:
    recent = "\n".join(
        f"{i}. {_format_set(s)}" for i, s in enumerate(analytics.recent_sets, start=1)
    )
    return f"""As a certified personal trainer, give a detailed progress analysis for this exercise.

EXERCISE: {exercise_name}

PROGRESS METRICS:
{_format_metrics(analytics)}

LAST SETS:
{recent}

Cover: overall assessment, strengths, areas to improve, concrete advice for the next
sessions, periodisation, recovery, and motivation based on the achievements.
Be specific with the numbers provided."""


class CoachService:
    """Coaching flows on top of the generative-language client."""

    def __init__(self, client: GeminiClient):
        self._client = client

    async def recommend(
        self,
        exercise_name: str,
        history: Sequence[WorkoutSetRecord],
        analytics: ProgressAnalytics | None,
    ) -> Recommendation:
        """
        Next-set recommendation. `history` is newest first.
        No history -> starter recommendation; AI failure or unparseable reply ->
        recommendation derived from the most recent set.
        """
        if not history or analytics is None:
            return starter_recommendation(exercise_name)

        prompt = build_recommendation_prompt(exercise_name, history, analytics)
        try:
            text = await self._client.generate(prompt)
            recommendation = parse_recommendation(text, exercise_name)
        except CoachServiceError as e:
            logger.warning("AI recommendation for %r unavailable, using fallback: %s", exercise_name, e)
            return fallback_recommendation(exercise_name, history[0])

        return recommendation.model_copy(
            update={"confidence_level": confidence_level(len(history), analytics.workout_frequency)}
        )

    async def analyze_progress(self, exercise_name: str, analytics: ProgressAnalytics | None) -> str:
        if analytics is None:
            return NOT_ENOUGH_DATA
        try:
            return await self._client.generate(build_progress_prompt(exercise_name, analytics))
        except CoachServiceError as e:
            logger.warning("AI progress analysis for %r failed: %s", exercise_name, e)
            return f"Could not generate the progress analysis for {exercise_name}. Please try again later."

    async def chat(self, message: str, history: Sequence[ChatMessageRead]) -> str:
        """Reply to `message` given prior turns. Raises AIServiceUnavailableError."""
        return await self._client.generate(message, history=history, system_prompt=CHAT_SYSTEM_PROMPT)
