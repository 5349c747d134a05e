from __future__ import annotations

"""Character sets described with a compact ``tr``-like syntax.

A definition string is read left to right and may contain:

* ``a`` a single character,
* ``a-e`` an inclusive range,
* ``^a`` every character except ``a``,
* ``^a-e`` every character outside the range.

A lone ``^`` or a ``-`` that cannot start a range is taken literally.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class CharRange:
    """An inclusive run of code points, optionally negated."""

    start: str
    end: str
    negated: bool = False

    def __post_init__(self) -> None:
        if len(self.start) != 1 or len(self.end) != 1:
            raise ValueError("CharRange bounds must be single characters")
        if self.start > self.end:
            start, end = self.end, self.start
            object.__setattr__(self, "start", start)
            object.__setattr__(self, "end", end)

    @classmethod
    def single(cls, char: str, *, negated: bool = False) -> "CharRange":
        return cls(char, char, negated)

    def contains(self, char: str) -> bool:
        inside = self.start <= char <= self.end
        return inside != self.negated

    def __contains__(self, char: object) -> bool:
        return isinstance(char, str) and len(char) == 1 and self.contains(char)

    def __iter__(self) -> Iterator[str]:
        if self.negated:
            raise TypeError("cannot iterate a negated CharRange")
        for code in range(ord(self.start), ord(self.end) + 1):
            yield chr(code)

    def __str__(self) -> str:
        prefix = "^" if self.negated else ""
        if self.start == self.end:
            return f"{prefix}{self.start}"
        return f"{prefix}{self.start}-{self.end}"


def parse_definition(definition: str) -> List[CharRange]:
    """Split one definition string into its :class:`CharRange` parts."""

    ranges: List[CharRange] = []
    pos = 0
    length = len(definition)
    while pos < length:
        remainder = length - pos
        if remainder >= 4 and definition[pos] == "^" and definition[pos + 2] == "-":
            ranges.append(CharRange(definition[pos + 1], definition[pos + 3], True))
            pos += 4
        elif remainder >= 3 and definition[pos + 1] == "-":
            ranges.append(CharRange(definition[pos], definition[pos + 2]))
            pos += 3
        elif remainder >= 2 and definition[pos] == "^":
            ranges.append(CharRange.single(definition[pos + 1], negated=True))
            pos += 2
        else:
            ranges.append(CharRange.single(definition[pos]))
            pos += 1
    return ranges


class CharSet:
    """Immutable union of :class:`CharRange` values."""

    def __init__(self, *definitions: Optional[str]) -> None:
        ranges: List[CharRange] = []
        for definition in definitions:
            if definition:
                for char_range in parse_definition(definition):
                    if char_range not in ranges:
                        ranges.append(char_range)
        self._ranges: Tuple[CharRange, ...] = tuple(ranges)

    @classmethod
    def of(cls, *definitions: Optional[str]) -> "CharSet":
        """Return a shared instance for the given definitions."""

        return _cached_charset(definitions)

    @property
    def ranges(self) -> Tuple[CharRange, ...]:
        return self._ranges

    def contains(self, char: str) -> bool:
        return any(char_range.contains(char) for char_range in self._ranges)

    def __contains__(self, char: object) -> bool:
        return isinstance(char, str) and len(char) == 1 and self.contains(char)

    def __bool__(self) -> bool:
        return bool(self._ranges)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CharSet):
            return NotImplemented
        return set(self._ranges) == set(other._ranges)

    def __hash__(self) -> int:
        return hash(frozenset(self._ranges))

    def __repr__(self) -> str:
        return f"CharSet({', '.join(repr(str(r)) for r in self._ranges)})"


@lru_cache(maxsize=256)
def _cached_charset(definitions: Tuple[Optional[str], ...]) -> CharSet:
    return CharSet(*definitions)
