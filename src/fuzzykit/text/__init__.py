from .charset import CharRange, CharSet, parse_definition
from .charset_ops import contains_any, count, delete, keep, squeeze
from .strings import common_prefix, difference, index_of_difference

__all__ = [
    "CharRange",
    "CharSet",
    "parse_definition",
    "contains_any",
    "count",
    "delete",
    "keep",
    "squeeze",
    "common_prefix",
    "difference",
    "index_of_difference",
]
