from .levenshtein import levenshtein_distance
from .jaro_winkler import (
    DEFAULT_PREFIX_LIMIT,
    DEFAULT_SCALING_FACTOR,
    jaro_similarity,
    jaro_winkler_distance,
)
from .fuzzy import fuzzy_score

__all__ = [
    "levenshtein_distance",
    "jaro_similarity",
    "jaro_winkler_distance",
    "DEFAULT_PREFIX_LIMIT",
    "DEFAULT_SCALING_FACTOR",
    "fuzzy_score",
]
