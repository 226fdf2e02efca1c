"""
String similarity helpers.

Used to tell the player when a wrong attempt was a near miss. Matching
in the recall session itself stays exact on the normalized form.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(frozen=True)
class MatchResult:
    """A candidate word scored against a query."""
    word: str
    distance: int
    similarity: float


def levenshtein_distance(first: str, second: str) -> int:
    """
    Minimum number of single-character insertions, deletions or
    substitutions needed to turn ``first`` into ``second``.
    """
    if not first:
        return len(second)
    if not second:
        return len(first)

    previous = list(range(len(second) + 1))
    for i, char_a in enumerate(first, start=1):
        current = [i]
        for j, char_b in enumerate(second, start=1):
            cost = 0 if char_a == char_b else 1
            current.append(min(
                previous[j] + 1,         # deletion
                current[j - 1] + 1,      # insertion
                previous[j - 1] + cost,  # substitution
            ))
        previous = current
    return previous[-1]


def similarity_score(first: str, second: str) -> float:
    """
    Similarity in [0.0, 1.0]; 1.0 means identical.
    """
    max_len = max(len(first), len(second))
    if max_len == 0:
        return 1.0
    return 1.0 - levenshtein_distance(first, second) / max_len


def is_similar(first: str, second: str, threshold: float) -> bool:
    return similarity_score(first, second) >= threshold


def _score(query: str, word: str) -> MatchResult:
    return MatchResult(
        word=word,
        distance=levenshtein_distance(query, word),
        similarity=similarity_score(query, word),
    )


def find_best_match(query: str, words: Sequence[str]) -> Optional[MatchResult]:
    """Return the most similar word, or None for an empty list."""
    if not words:
        return None
    return max((_score(query, word) for word in words), key=lambda m: m.similarity)
