"""
Best-fit strength estimation from a set of relations.

Relations collected from different comparisons usually contradict each other,
so the estimate is the integer that minimises the summed squared violation of
all of them. The relation count per item is bounded by the incubation limit
and the search window only spans the relation values, so every integer in the
window is scored.
"""

import math
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

from .config import DEFAULT_CONFIG, EloListConfig
from .relations import Relation, RelationKind

# Candidates scored per numpy batch
CHUNK_SIZE = 2 ** 20


def _numeric(relations: Iterable[Relation]) -> Sequence[Relation]:
    return [r for r in relations if r.kind.is_numeric]


def search_window(relations: Iterable[Relation]) -> Optional[Tuple[float, float]]:
    """
    Compute the range that is guaranteed to contain the best estimate.

    Args:
        relations: Relations of one item

    Returns:
        ``(low, high)`` widened by one on each side, or ``None`` if no
        relation carries a value
    """
    numeric = _numeric(relations)
    if not numeric:
        return None

    low = high = numeric[0].value
    for relation in numeric:
        if relation.kind in (RelationKind.EQUAL, RelationKind.LESS_THAN):
            low = min(low, relation.value)
        if relation.kind in (RelationKind.EQUAL, RelationKind.GREATER_THAN):
            high = max(high, relation.value)

    return low - 1, high + 1


def _squared_errors(relations: Sequence[Relation], candidates: np.ndarray) -> np.ndarray:
    """Total squared residual for each candidate, shape ``(len(candidates),)``."""
    x = candidates[:, np.newaxis]
    values = np.array([r.value for r in relations], dtype=float)
    kinds = [r.kind for r in relations]

    equal = np.array([k is RelationKind.EQUAL for k in kinds])
    less = np.array([k is RelationKind.LESS_THAN for k in kinds])
    greater = np.array([k is RelationKind.GREATER_THAN for k in kinds])

    residuals = np.zeros((len(candidates), len(relations)))
    residuals = np.where(equal, np.abs(values - x), residuals)
    residuals = np.where(less, np.maximum(0.0, x - values + 1), residuals)
    residuals = np.where(greater, np.maximum(0.0, values - x + 1), residuals)

    return np.sum(residuals * residuals, axis=1)


def squared_error(relations: Iterable[Relation], candidate: float) -> float:
    """
    Score a single candidate strength against a set of relations.

    Args:
        relations: Relations of one item
        candidate: Strength to score

    Returns:
        Sum of squared residuals; unparseable relations contribute nothing
    """
    numeric = _numeric(relations)
    if not numeric:
        return 0.0
    return float(_squared_errors(numeric, np.array([candidate], dtype=float))[0])


def estimate(relations: Iterable[Relation], config: EloListConfig = DEFAULT_CONFIG) -> int:
    """
    Find the integer strength that best satisfies all relations.

    Args:
        relations: Relations of one item
        config: Supplies the default strength

    Returns:
        The candidate with the lowest squared error; on a tie the lowest
        candidate wins. Items without numeric relations get the default
        strength.
    """
    numeric = _numeric(relations)
    window = search_window(numeric)
    if window is None:
        return config.default_strength

    low, high = window
    first, last = math.ceil(low), math.floor(high)

    best_error = math.inf
    best_candidate = first
    for start in range(first, last + 1, CHUNK_SIZE):
        candidates = np.arange(start, min(start + CHUNK_SIZE, last + 1), dtype=float)
        errors = _squared_errors(numeric, candidates)

        # argmin returns the first minimum, i.e. the lowest candidate on ties
        index = int(np.argmin(errors))
        if errors[index] < best_error:
            best_error = float(errors[index])
            best_candidate = start + index

    return int(best_candidate)
