from __future__ import annotations

"""Deterministic hash codes built by folding field values.

Python's ``hash`` is salted per process for ``str`` and ``bytes``; the builder
here folds characters and bytes by code point instead, so the same values
always produce the same code.
"""

import dataclasses
import struct
from typing import Any, Iterable, List, Tuple

from .errors import InvalidArgumentError, require_not_none

DEFAULT_INITIAL = 17
DEFAULT_MULTIPLIER = 37


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _float_bits(value: float) -> int:
    bits = struct.unpack(">q", struct.pack(">d", value))[0]
    return _to_int32(bits ^ (bits >> 32))


class HashCodeBuilder:
    """Accumulates a 32-bit hash code one value at a time.

    ``hash()`` and ``==`` follow the running total, so a builder placed in a
    set or used as a dict key must not be appended to afterwards.
    """

    def __init__(
        self, initial: int = DEFAULT_INITIAL, multiplier: int = DEFAULT_MULTIPLIER
    ) -> None:
        if initial == 0 or initial % 2 == 0:
            raise InvalidArgumentError(f"initial must be a non-zero odd number, got {initial}")
        if multiplier == 0 or multiplier % 2 == 0:
            raise InvalidArgumentError(
                f"multiplier must be a non-zero odd number, got {multiplier}"
            )
        self.multiplier = multiplier
        self._total = _to_int32(initial)

    def _fold(self, value: int) -> None:
        self._total = _to_int32(self._total * self.multiplier + value)

    def append(self, value: Any) -> "HashCodeBuilder":
        if value is None:
            self._fold(0)
        elif isinstance(value, bool):
            self._fold(0 if value else 1)
        elif isinstance(value, int):
            if -0x80000000 <= value <= 0x7FFFFFFF:
                self._fold(value)
            else:
                self._fold(_to_int32(value ^ (value >> 32)))
        elif isinstance(value, float):
            self._fold(_float_bits(value))
        elif isinstance(value, str):
            if len(value) == 1:
                self._fold(ord(value))
            else:
                self._append_all(value)
        elif isinstance(value, (bytes, bytearray)):
            self._append_all(value)
        elif isinstance(value, dict):
            # each entry hashed on its own, then summed like a set of pairs
            self._fold(
                _to_int32(
                    sum(
                        HashCodeBuilder().append(key).append(item).to_hash_code()
                        for key, item in value.items()
                    )
                )
            )
        elif isinstance(value, (list, tuple, range)):
            self._append_all(value)
        elif isinstance(value, (set, frozenset)):
            # unordered: fold a commutative sum so iteration order is irrelevant
            self._fold(
                _to_int32(sum(HashCodeBuilder().append(item).to_hash_code() for item in value))
            )
        elif dataclasses.is_dataclass(value) and not isinstance(value, type):
            self._fold(reflection_hash_code(value))
        else:
            self._fold(_to_int32(hash(value)))
        return self

    def _append_all(self, values: Iterable[Any]) -> None:
        for item in values:
            self.append(item)

    def append_super(self, super_hash_code: int) -> "HashCodeBuilder":
        self._fold(_to_int32(super_hash_code))
        return self

    def to_hash_code(self) -> int:
        return self._total

    def __hash__(self) -> int:
        return self._total

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashCodeBuilder):
            return NotImplemented
        return self._total == other._total

    def __repr__(self) -> str:
        return f"HashCodeBuilder(total={self._total})"


def _declared_fields(obj: Any) -> List[Tuple[str, Any]]:
    if dataclasses.is_dataclass(obj):
        return [
            (field.name, getattr(obj, field.name))
            for field in dataclasses.fields(obj)
            if field.compare and (field.hash is None or field.hash)
        ]
    slots: List[str] = []
    for klass in reversed(type(obj).__mro__):
        declared = klass.__dict__.get("__slots__", ())
        if isinstance(declared, str):
            declared = (declared,)
        slots.extend(name for name in declared if name not in ("__dict__", "__weakref__"))
    if slots:
        return [(name, getattr(obj, name)) for name in slots if hasattr(obj, name)]
    # builtins such as str and int carry no instance fields
    return list(getattr(obj, "__dict__", {}).items())


def reflection_hash_code(
    obj: Any,
    *,
    exclude: Iterable[str] = (),
    include_private: bool = False,
    initial: int = DEFAULT_INITIAL,
    multiplier: int = DEFAULT_MULTIPLIER,
) -> int:
    """Fold every declared field of *obj* into a hash code.

    Fields come from the dataclass definition when there is one, then
    ``__slots__``, then the instance ``__dict__``. Names starting with an
    underscore are skipped unless *include_private* is set.
    """

    require_not_none(obj=obj)
    excluded = set(exclude)
    builder = HashCodeBuilder(initial, multiplier)
    for name, value in _declared_fields(obj):
        if name in excluded:
            continue
        if name.startswith("_") and not include_private:
            continue
        builder.append(value)
    return builder.to_hash_code()
