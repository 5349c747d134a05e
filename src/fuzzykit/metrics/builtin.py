from __future__ import annotations

"""Metrics wrapping the functions in :mod:`fuzzykit.distance`."""

from typing import Hashable, Optional, Sequence

from ..distance import (
    DEFAULT_PREFIX_LIMIT,
    DEFAULT_SCALING_FACTOR,
    fuzzy_score,
    jaro_similarity,
    jaro_winkler_distance,
    levenshtein_distance,
)
from ..errors import InvalidArgumentError
from .base_metric import BaseMetric, Score


class LevenshteinMetric(BaseMetric):
    name = "levenshtein"

    def score(self, a: Sequence[Hashable] | str, b: Sequence[Hashable] | str) -> Score:
        return levenshtein_distance(a, b)


class BoundedLevenshteinMetric(BaseMetric):
    """Levenshtein distance that yields ``-1`` once past ``threshold``."""

    name = "levenshtein_bounded"

    def __init__(self, *, threshold: Optional[int] = None) -> None:
        if threshold is None:
            raise InvalidArgumentError("levenshtein_bounded requires a threshold")
        if threshold < 0:
            raise InvalidArgumentError(f"threshold must not be negative, got {threshold}")
        self.threshold = threshold

    def score(self, a: Sequence[Hashable] | str, b: Sequence[Hashable] | str) -> Score:
        return levenshtein_distance(a, b, self.threshold)


class JaroMetric(BaseMetric):
    name = "jaro"
    higher_is_better = True

    def score(self, a: Sequence[Hashable] | str, b: Sequence[Hashable] | str) -> Score:
        return jaro_similarity(a, b)


class JaroWinklerMetric(BaseMetric):
    name = "jaro_winkler"
    higher_is_better = True

    def __init__(
        self,
        *,
        scaling_factor: float = DEFAULT_SCALING_FACTOR,
        prefix_limit: int = DEFAULT_PREFIX_LIMIT,
    ) -> None:
        self.scaling_factor = scaling_factor
        self.prefix_limit = prefix_limit

    def score(self, a: Sequence[Hashable] | str, b: Sequence[Hashable] | str) -> Score:
        return jaro_winkler_distance(
            a, b, scaling_factor=self.scaling_factor, prefix_limit=self.prefix_limit
        )


class FuzzyMetric(BaseMetric):
    """Subsequence score of the right-hand query inside the left-hand term.

    Unlike the other metrics this one is not symmetric.
    """

    name = "fuzzy"
    higher_is_better = True

    def score(self, a: Sequence[Hashable] | str, b: Sequence[Hashable] | str) -> Score:
        if not isinstance(a, str) or not isinstance(b, str):
            raise InvalidArgumentError("fuzzy metric only compares strings")
        return fuzzy_score(a, b)


__all__ = [
    "LevenshteinMetric",
    "BoundedLevenshteinMetric",
    "JaroMetric",
    "JaroWinklerMetric",
    "FuzzyMetric",
]
