"""Application constants."""

import uuid

# Singleton user until auth is wired to the external provider
USER_ID = uuid.UUID("00000000-0000-0000-0000-000000000001")

# Exercise name matching
MATCH_TOP_N = 3
EXACT_MATCH_SCORE = 100.0
CONTAINMENT_MIN_SCORE = 80.0
SYNONYM_MATCH_SCORE = 90.0
WORD_COVERAGE_SCORE = 75.0
WORD_SIMILARITY_THRESHOLD = 70.0
FALLBACK_SIMILARITY_THRESHOLD = 60.0

# Progress analytics
RECENT_SETS_LIMIT = 5
TOP_EXERCISES_LIMIT = 5

# Fallback recommendation when the AI reply is unusable
FALLBACK_WEIGHT_INCREMENT_KG = 2.5
FALLBACK_RPE_THRESHOLD = 7
FALLBACK_MIN_REPS = 6
STARTER_WEIGHT_KG = 20.0
STARTER_REP_RANGE = "8-12"

# History passed to the coach as prompt context
COACH_HISTORY_LIMIT = 10
COACH_PROMPT_SETS = 8

# Session limits
MAX_SETS_PER_EXERCISE_PER_SESSION = 10
