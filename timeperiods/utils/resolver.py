"""Shared fuzzy matching helpers.

Used to turn a misspelled name into a short list of close candidates
("mnth" → "month"). Candidates are plain strings; scores are RapidFuzz
WRatio values in 0-100.
"""

from __future__ import annotations
from typing import Iterable

try:
    from rapidfuzz import fuzz, process
except ImportError as e:
    raise ImportError("rapidfuzz not installed. pip install rapidfuzz") from e


def topk_matches(
    query: str,
    candidates: Iterable[str],
    k: int = 3,
    threshold: int = 0,
) -> list[tuple[str, float]]:
    """Return up to `k` (candidate, score) pairs at or above `threshold`.

    Ordered by descending score; ties keep candidate order.

    Examples:
        >>> topk_matches("wek", ["year", "week", "weekday"], k=2)
        [('week', 85.7...), ('weekday', 72.0...)]
    """
    choices = [c for c in candidates if c]
    if not query or not choices:
        return []
    matches = process.extract(
        query.lower(),
        {c: c.lower() for c in choices},
        scorer=fuzz.WRatio,
        limit=k,
        score_cutoff=threshold,
    )
    # process.extract on a dict yields (choice_value, score, key)
    return [(key, score) for _, score, key in matches]


__all__ = [
    "topk_matches",
]
