"""Vector similarity scoring."""

from __future__ import annotations

import math
from typing import Sequence

# Score reported when either vector has zero norm or holds NaN components.
DEGENERATE_SIMILARITY = 0.0


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine of the angle between ``a`` and ``b``.

    Raises:
        ValueError: If the vectors differ in length.
    """
    if len(a) != len(b):
        raise ValueError(f"Vector length mismatch: {len(a)} != {len(b)}")

    dot = sum(x * y for x, y in zip(a, b))
    norm_a = math.sqrt(sum(x * x for x in a))
    norm_b = math.sqrt(sum(y * y for y in b))
    if norm_a == 0.0 or norm_b == 0.0:
        return DEGENERATE_SIMILARITY
    score = dot / (norm_a * norm_b)
    if math.isnan(score):
        return DEGENERATE_SIMILARITY
    return score


def best_match(
    query: Sequence[float], candidates: Sequence[Sequence[float]]
) -> tuple[int, float] | None:
    """Return ``(index, score)`` of the most similar candidate, first index on ties."""
    best_index = -1
    best_score = -math.inf
    for index, candidate in enumerate(candidates):
        score = cosine_similarity(query, candidate)
        if score > best_score:
            best_index = index
            best_score = score
    if best_index < 0:
        return None
    return best_index, best_score
