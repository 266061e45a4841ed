"""Exercise name resolution: map free-text names onto catalog names.

Both sides are normalized (case, accents, punctuation, Spanish connectors),
then each catalog name goes through a cascade of strategies; the first one
that hits decides that name's score:

1. exact match                          -> 100
2. one string contains the other        -> max(80, similarity)
3. both in the same synonym group       -> 90
4. every search word covered (>= 2 words, any order) -> 75
5. plain similarity, only if > 60

Results are ranked by score and the top three kept. Pure functions, no I/O
except loading the synonym table.
"""

from __future__ import annotations

import json
import logging
import re
import unicodedata
from collections.abc import Iterable, Mapping, Sequence
from functools import lru_cache
from pathlib import Path
from typing import NamedTuple

from fitcoach.core.constants import (
    CONTAINMENT_MIN_SCORE,
    EXACT_MATCH_SCORE,
    FALLBACK_SIMILARITY_THRESHOLD,
    MATCH_TOP_N,
    SYNONYM_MATCH_SCORE,
    WORD_COVERAGE_SCORE,
    WORD_SIMILARITY_THRESHOLD,
)

logger = logging.getLogger(__name__)

DEFAULT_SYNONYMS_PATH = Path(__file__).resolve().parent.parent / "data" / "exercise_synonyms.json"

_WHITESPACE = re.compile(r"\s+")
_NON_WORD = re.compile(r"[^\w ]", re.ASCII)
_SPACES = re.compile(r" +")
_CONNECTORS = (
    (re.compile(r"\bcon\b"), "with"),
    (re.compile(r"\bde\b"), "with"),
    (re.compile(r"\ben\b"), "on"),
)


class Match(NamedTuple):
    candidate_name: str
    score: float


def normalize_exercise_name(name: str) -> str:
    """Lowercase, strip accents and punctuation, collapse spaces, map con/de/en connectors."""
    text = unicodedata.normalize("NFD", name.lower())
    text = "".join(ch for ch in text if not unicodedata.combining(ch))
    text = _WHITESPACE.sub(" ", text)
    text = _NON_WORD.sub("", text)
    text = _SPACES.sub(" ", text).strip()
    for pattern, replacement in _CONNECTORS:
        text = pattern.sub(replacement, text)
    return text


def levenshtein_distance(a: str, b: str) -> int:
    """Edit distance with unit cost insertions, deletions and substitutions."""
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (ca != cb),
                )
            )
        previous = current
    return previous[-1]


def similarity(a: str, b: str) -> float:
    """Percent similarity (0-100) derived from edit distance; two empty strings are 100."""
    longest = max(len(a), len(b))
    if longest == 0:
        return 100.0
    return (longest - levenshtein_distance(a, b)) / longest * 100


class SynonymTable:
    """Groups of names (canonical + synonyms) that refer to the same exercise.

    Built from a `canonical -> [synonyms]` mapping; names are normalized once here.
    """

    def __init__(self, mapping: Mapping[str, Iterable[str]]):
        groups = []
        for canonical, synonyms in mapping.items():
            group = {normalize_exercise_name(canonical)}
            group.update(normalize_exercise_name(s) for s in synonyms)
            group.discard("")
            groups.append(frozenset(group))
        self._groups: tuple[frozenset[str], ...] = tuple(groups)

    def __len__(self) -> int:
        return len(self._groups)

    def same_group(self, a: str, b: str) -> bool:
        """True if normalized names a and b appear together in one group."""
        return any(a in group and b in group for group in self._groups)

    @classmethod
    def from_file(cls, path: str | Path) -> "SynonymTable":
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, dict):
            raise ValueError(f"Synonym file {path} must hold a JSON object")
        return cls(data)


@lru_cache
def load_synonyms(path: str = "") -> SynonymTable:
    """Synonym table from `path`, or the bundled table when empty. Cached per path."""
    source = Path(path) if path else DEFAULT_SYNONYMS_PATH
    table = SynonymTable.from_file(source)
    logger.info("Loaded %d synonym groups from %s", len(table), source)
    return table


def _words_covered(search_words: Sequence[str], candidate_words: Sequence[str]) -> bool:
    return all(
        any(
            cw in sw or sw in cw or similarity(sw, cw) > WORD_SIMILARITY_THRESHOLD
            for cw in candidate_words
        )
        for sw in search_words
    )


def _score_candidate(search: str, candidate: str, synonyms: SynonymTable) -> float | None:
    if search == candidate:
        return EXACT_MATCH_SCORE
    if search in candidate or candidate in search:
        return max(CONTAINMENT_MIN_SCORE, similarity(search, candidate))
    if synonyms.same_group(search, candidate):
        return SYNONYM_MATCH_SCORE
    search_words = search.split(" ")
    if len(search_words) >= 2 and _words_covered(search_words, candidate.split(" ")):
        return WORD_COVERAGE_SCORE
    score = similarity(search, candidate)
    if score > FALLBACK_SIMILARITY_THRESHOLD:
        return score
    return None


def find_matches(
    search_name: str,
    catalog_names: Iterable[str],
    synonyms: SynonymTable | None = None,
    limit: int = MATCH_TOP_N,
) -> list[Match]:
    """Ranked candidates (best first, at most `limit`) for `search_name`; [] when nothing qualifies."""
    search = normalize_exercise_name(search_name)
    if not search:
        return []
    if synonyms is None:
        synonyms = load_synonyms()

    matches: list[Match] = []
    for name in catalog_names:
        candidate = normalize_exercise_name(name)
        if not candidate:
            continue
        score = _score_candidate(search, candidate, synonyms)
        if score is not None:
            matches.append(Match(name, score))
    # sorted() is stable, so equal scores keep catalog order
    return sorted(matches, key=lambda m: m.score, reverse=True)[:limit]


def resolve_exercise_name(
    search_name: str,
    catalog_names: Iterable[str],
    synonyms: SynonymTable | None = None,
) -> str | None:
    """Best catalog name for `search_name`, or None when there is no acceptable match."""
    matches = find_matches(search_name, catalog_names, synonyms)
    if not matches:
        logger.info("No catalog match for exercise %r", search_name)
        return None
    best = matches[0]
    logger.info("Resolved exercise %r to %r (score %.1f)", search_name, best.candidate_name, best.score)
    return best.candidate_name
