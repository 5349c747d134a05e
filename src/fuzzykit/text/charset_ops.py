from __future__ import annotations

"""Count, filter and squeeze strings against a :class:`CharSet`."""

from typing import Optional

from .charset import CharSet


def _all_empty(sets: tuple[Optional[str], ...]) -> bool:
    return all(not definition for definition in sets)


def contains_any(s: Optional[str], *sets: Optional[str]) -> bool:
    """True when any character of *s* belongs to the set."""

    if not s or _all_empty(sets):
        return False
    chars = CharSet.of(*sets)
    return any(chars.contains(ch) for ch in s)


def count(s: Optional[str], *sets: Optional[str]) -> int:
    """Number of characters of *s* that belong to the set."""

    if not s or _all_empty(sets):
        return 0
    chars = CharSet.of(*sets)
    return sum(1 for ch in s if chars.contains(ch))


def delete(s: Optional[str], *sets: Optional[str]) -> Optional[str]:
    """Drop every character of *s* that belongs to the set."""

    if not s or _all_empty(sets):
        return s
    return _modify(s, sets, keep_members=False)


def keep(s: Optional[str], *sets: Optional[str]) -> Optional[str]:
    """Keep only the characters of *s* that belong to the set."""

    if s is None:
        return None
    if not s or _all_empty(sets):
        return ""
    return _modify(s, sets, keep_members=True)


def _modify(s: str, sets: tuple[Optional[str], ...], *, keep_members: bool) -> str:
    chars = CharSet.of(*sets)
    return "".join(ch for ch in s if chars.contains(ch) == keep_members)


def squeeze(s: Optional[str], *sets: Optional[str]) -> Optional[str]:
    """Collapse runs of a repeated character to one if it is in the set.

    ``squeeze("hello", "k-p")`` gives ``"helo"``; ``squeeze("hello", "a-e")``
    leaves the string untouched.
    """

    if not s or _all_empty(sets):
        return s
    chars = CharSet.of(*sets)
    pieces = [s[0]]
    last = s[0]
    for ch in s[1:]:
        if ch == last and chars.contains(ch):
            continue
        pieces.append(ch)
        last = ch
    return "".join(pieces)
