from __future__ import annotations

"""Prefix and difference helpers for strings and other sequences."""

from typing import Hashable, Optional, Sequence


def index_of_difference(
    a: Optional[Sequence[Hashable] | str], b: Optional[Sequence[Hashable] | str]
) -> int:
    """Index of the first position where *a* and *b* differ, ``-1`` if equal.

    Two ``None`` values count as equal; a single ``None`` differs at ``0``.
    """

    if a is None and b is None:
        return -1
    if a is None or b is None:
        return 0
    for index, (x, y) in enumerate(zip(a, b)):
        if x != y:
            return index
    if len(a) == len(b):
        return -1
    return min(len(a), len(b))


def difference(a: Optional[str], b: Optional[str]) -> Optional[str]:
    """Return the tail of *b* starting where it first differs from *a*."""

    if a is None:
        return b
    if b is None:
        return a
    at = index_of_difference(a, b)
    if at == -1:
        return ""
    return b[at:]


def common_prefix(*strings: Optional[str]) -> str:
    """Longest prefix shared by every argument; empty if any is ``None``."""

    if not strings or any(not s for s in strings):
        return ""
    shortest = min(strings, key=len)
    for index, char in enumerate(shortest):
        if any(s[index] != char for s in strings):
            return shortest[:index]
    return shortest
