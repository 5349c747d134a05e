from __future__ import annotations

"""All-pairs scoring and candidate ranking on top of numpy."""

from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

from ..metrics import BaseMetric, FuzzyMetric, Score, get_metric


def _as_metric(metric: BaseMetric | str, params: dict[str, Any]) -> BaseMetric:
    if isinstance(metric, BaseMetric):
        return metric
    return get_metric(metric, **params)


def pairwise_matrix(
    items: Sequence[str], metric: BaseMetric | str = "levenshtein", **params: Any
) -> np.ndarray:
    """Return the ``len(items) x len(items)`` score matrix.

    Symmetric metrics fill the upper triangle and mirror it; the fuzzy score
    depends on argument order so every cell is computed.
    """

    scorer = _as_metric(metric, params)
    size = len(items)
    dtype = float if scorer.higher_is_better else int
    matrix = np.zeros((size, size), dtype=dtype)
    symmetric = not isinstance(scorer, FuzzyMetric)
    for i in range(size):
        start = i if symmetric else 0
        for j in range(start, size):
            value = scorer.score(items[i], items[j])
            matrix[i, j] = value
            if symmetric:
                matrix[j, i] = value
    return matrix


def rank_candidates(
    query: str,
    candidates: Sequence[str],
    metric: BaseMetric | str = "jaro_winkler",
    *,
    limit: Optional[int] = None,
    **params: Any,
) -> List[Tuple[str, Score]]:
    """Order *candidates* from best to worst match for *query*.

    For bounded Levenshtein, candidates past the threshold are dropped.
    """

    scorer = _as_metric(metric, params)
    scores = np.array([scorer.score(candidate, query) for candidate in candidates])
    if scores.size == 0:
        return []
    keep = np.flatnonzero(scores >= 0)
    keys = -scores[keep] if scorer.higher_is_better else scores[keep]
    ordered = keep[np.argsort(keys, kind="stable")]
    ranked = [(candidates[i], scores[i].item()) for i in ordered]
    if limit is not None:
        return ranked[: max(limit, 0)]
    return ranked
