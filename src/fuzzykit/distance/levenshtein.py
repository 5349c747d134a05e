from __future__ import annotations

"""Levenshtein edit distance, plain and threshold-bounded."""

import sys
from typing import Hashable, List, Optional, Sequence

from ..errors import InvalidArgumentError, require_not_none

# Marks cells outside the diagonal band; larger than any real distance.
_UNREACHABLE = sys.maxsize


def levenshtein_distance(
    a: Sequence[Hashable] | str,
    b: Sequence[Hashable] | str,
    threshold: Optional[int] = None,
) -> int:
    """Return the Levenshtein distance between *a* and *b*.

    With a *threshold* the computation is restricted to a diagonal band of
    width ``2 * threshold + 1`` and ``-1`` is returned as soon as the distance
    is known to exceed it. Without one the full distance is computed using two
    rolling rows sized to the shorter input.
    """

    require_not_none(a=a, b=b)
    if threshold is None:
        return _unbounded(a, b)
    if threshold < 0:
        raise InvalidArgumentError(f"threshold must not be negative, got {threshold}")
    return _bounded(a, b, threshold)


def _unbounded(a: Sequence[Hashable] | str, b: Sequence[Hashable] | str) -> int:
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)
    previous = list(range(len(b) + 1))
    current = [0] * (len(b) + 1)
    for i, char_a in enumerate(a, start=1):
        current[0] = i
        for j, char_b in enumerate(b, start=1):
            insert_cost = current[j - 1] + 1
            delete_cost = previous[j] + 1
            replace_cost = previous[j - 1] + (char_a != char_b)
            current[j] = min(insert_cost, delete_cost, replace_cost)
        previous, current = current, previous
    return previous[-1]


def _bounded(
    a: Sequence[Hashable] | str, b: Sequence[Hashable] | str, threshold: int
) -> int:
    # a is the shorter input and indexes the rows' columns
    if len(a) > len(b):
        a, b = b, a
    n, m = len(a), len(b)
    if m - n > threshold:
        return -1
    if n == 0:
        return m

    boundary = min(n, threshold) + 1
    previous: List[int] = [i if i < boundary else _UNREACHABLE for i in range(n + 1)]
    current: List[int] = [_UNREACHABLE] * (n + 1)

    for j in range(1, m + 1):
        char_b = b[j - 1]
        current[0] = j
        low = max(1, j - threshold)
        high = min(n, j + threshold)
        if low > high:
            return -1
        if low > 1:
            current[low - 1] = _UNREACHABLE

        row_min = _UNREACHABLE
        for i in range(low, high + 1):
            if a[i - 1] == char_b:
                value = previous[i - 1]
            else:
                value = 1 + min(current[i - 1], previous[i], previous[i - 1])
            current[i] = value
            if value < row_min:
                row_min = value
        if row_min > threshold:
            return -1
        previous, current = current, previous

    return previous[n] if previous[n] <= threshold else -1
