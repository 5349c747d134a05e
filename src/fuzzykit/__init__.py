"""fuzzykit: string distance, similarity and character-set helpers."""
from importlib.metadata import version, PackageNotFoundError

from loguru import logger

from .distance import (
    fuzzy_score,
    jaro_similarity,
    jaro_winkler_distance,
    levenshtein_distance,
)
from .errors import InvalidArgumentError

try:
    __version__ = version("fuzzykit")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

logger.disable("fuzzykit")

__all__ = [
    "__version__",
    "InvalidArgumentError",
    "fuzzy_score",
    "jaro_similarity",
    "jaro_winkler_distance",
    "levenshtein_distance",
]
