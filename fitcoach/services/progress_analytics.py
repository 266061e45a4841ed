"""Progress analytics: reduce one exercise's set history into trend metrics.

Input sets are already scoped to one user, one exercise and the trailing
window, ordered by parent session start. Nothing here touches the database.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from datetime import date, datetime, timedelta, timezone

from fitcoach.core.constants import RECENT_SETS_LIMIT, TOP_EXERCISES_LIMIT
from fitcoach.schemas.analytics import ProgressAnalytics, WorkoutSummary
from fitcoach.schemas.workout import WorkoutSessionRecord, WorkoutSetRecord


def window_start(days: int, now: datetime | None = None) -> datetime:
    """Start of the trailing `days`-day window ending at `now` (UTC)."""
    now = now or datetime.now(timezone.utc)
    return now - timedelta(days=days)


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def _utc_date(moment: datetime) -> date:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).date()


def weight_trend(sets: Sequence[WorkoutSetRecord]) -> float:
    """Mean weight of the second half minus mean weight of the first half (split at n // 2).

    Fewer than two sets leave the first half empty, and a lone set is no trend: 0.
    """
    if len(sets) < 2:
        return 0.0
    mid = len(sets) // 2
    first = [s.weight_kg for s in sets[:mid]]
    second = [s.weight_kg for s in sets[mid:]]
    return _mean(second) - _mean(first)


def compute_progress_analytics(
    exercise_name: str,
    sets: Sequence[WorkoutSetRecord],
) -> ProgressAnalytics | None:
    """
    Summary metrics for an ordered set history. Returns None for an empty history.
    avg_rpe averages only sets that carry an RPE and stays None when none do.
    """
    if not sets:
        return None

    rpes = [s.rpe for s in sets if s.rpe is not None]
    return ProgressAnalytics(
        exercise_name=exercise_name,
        total_sets=len(sets),
        max_weight=max(s.weight_kg for s in sets),
        max_reps=max(s.reps for s in sets),
        total_volume=sum(s.weight_kg * s.reps for s in sets),
        avg_rpe=sum(rpes) / len(rpes) if rpes else None,
        weight_trend=weight_trend(sets),
        recent_sets=list(sets[-RECENT_SETS_LIMIT:]),
        workout_frequency=len({_utc_date(s.session_started_at) for s in sets}),
    )


def summarize_sessions(
    sessions: Sequence[WorkoutSessionRecord],
    sets: Sequence[WorkoutSetRecord],
) -> WorkoutSummary | None:
    """Session count, mean duration of completed sessions, and most-logged exercises."""
    if not sessions:
        return None

    durations = [s.total_duration_minutes or 0 for s in sessions if s.is_completed]
    counts = Counter(s.exercise_name for s in sets)
    return WorkoutSummary(
        total_sessions=len(sessions),
        avg_duration_minutes=round(_mean(durations)),
        top_exercises=[name for name, _ in counts.most_common(TOP_EXERCISES_LIMIT)],
    )
