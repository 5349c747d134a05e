from __future__ import annotations

"""Jaro and Jaro-Winkler similarity."""

from typing import Hashable, List, Sequence

from ..errors import InvalidArgumentError, require_not_none
from ..text.strings import index_of_difference

DEFAULT_SCALING_FACTOR = 0.1
DEFAULT_PREFIX_LIMIT = 4


def jaro_similarity(a: Sequence[Hashable] | str, b: Sequence[Hashable] | str) -> float:
    """Return the Jaro similarity of *a* and *b* in ``[0.0, 1.0]``."""

    require_not_none(a=a, b=b)
    len_a, len_b = len(a), len(b)
    if len_a == 0 and len_b == 0:
        return 1.0
    if len_a == 0 or len_b == 0:
        return 0.0

    window = max(0, max(len_a, len_b) // 2 - 1)
    matched_a = [False] * len_a
    matched_b = [False] * len_b
    matches = 0
    for i, char_a in enumerate(a):
        start = max(0, i - window)
        stop = min(len_b, i + window + 1)
        for j in range(start, stop):
            if not matched_b[j] and b[j] == char_a:
                matched_a[i] = True
                matched_b[j] = True
                matches += 1
                break
    if matches == 0:
        return 0.0

    ordered_a: List[Hashable] = [char for char, hit in zip(a, matched_a) if hit]
    ordered_b: List[Hashable] = [char for char, hit in zip(b, matched_b) if hit]
    mismatched = sum(1 for x, y in zip(ordered_a, ordered_b) if x != y)
    transpositions = mismatched / 2.0

    return (
        matches / len_a + matches / len_b + (matches - transpositions) / matches
    ) / 3.0


def jaro_winkler_distance(
    a: Sequence[Hashable] | str,
    b: Sequence[Hashable] | str,
    *,
    scaling_factor: float = DEFAULT_SCALING_FACTOR,
    prefix_limit: int = DEFAULT_PREFIX_LIMIT,
) -> float:
    """Return the Jaro-Winkler similarity of *a* and *b*.

    The Jaro score is boosted by ``scaling_factor`` for every leading element
    the inputs share, up to ``prefix_limit`` elements. ``1.0`` means identical
    and ``0.0`` means nothing matched. The result is not rounded.
    """

    require_not_none(a=a, b=b)
    if prefix_limit < 0:
        raise InvalidArgumentError(f"prefix_limit must not be negative, got {prefix_limit}")
    if scaling_factor < 0 or scaling_factor * prefix_limit > 1:
        raise InvalidArgumentError(
            "scaling_factor must be non-negative and at most 1 / prefix_limit, "
            f"got {scaling_factor} with prefix_limit={prefix_limit}"
        )

    jaro = jaro_similarity(a, b)
    difference_at = index_of_difference(a, b)
    shared = min(len(a), len(b)) if difference_at == -1 else difference_at
    prefix = min(shared, prefix_limit)
    return jaro + prefix * scaling_factor * (1.0 - jaro)
