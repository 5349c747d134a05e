from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from fuzzykit import InvalidArgumentError
from fuzzykit.hashing import HashCodeBuilder, reflection_hash_code


def test_empty_builder_returns_initial_value() -> None:
    assert HashCodeBuilder().to_hash_code() == 17
    assert HashCodeBuilder(3, 5).to_hash_code() == 3


def test_scalar_folding() -> None:
    assert HashCodeBuilder().append(None).to_hash_code() == 17 * 37
    assert HashCodeBuilder().append(5).to_hash_code() == 17 * 37 + 5
    assert HashCodeBuilder().append(True).to_hash_code() == 17 * 37
    assert HashCodeBuilder().append(False).to_hash_code() == 17 * 37 + 1
    assert HashCodeBuilder().append("a").to_hash_code() == 17 * 37 + 97


def test_float_folds_bit_pattern() -> None:
    # bits of 1.0 are 0x3FF0000000000000; high word xor low word
    assert HashCodeBuilder().append(1.0).to_hash_code() == 17 * 37 + 0x3FF00000


def test_sequences_fold_element_by_element() -> None:
    expected = HashCodeBuilder().append(1).append(2).to_hash_code()
    assert expected == (17 * 37 + 1) * 37 + 2
    assert HashCodeBuilder().append([1, 2]).to_hash_code() == expected
    assert HashCodeBuilder().append((1, 2)).to_hash_code() == expected
    assert HashCodeBuilder().append("ab").to_hash_code() == (17 * 37 + 97) * 37 + 98


def test_total_stays_in_signed_32_bit_range() -> None:
    builder = HashCodeBuilder()
    for value in range(1000):
        builder.append(value * 7919)
    builder.append(2**40 + 3)
    assert -(2**31) <= builder.to_hash_code() < 2**31
    assert hash(builder) == builder.to_hash_code()


def test_unordered_sets_are_order_independent() -> None:
    left = HashCodeBuilder().append(frozenset({"x", "y", "z"})).to_hash_code()
    right = HashCodeBuilder().append({"z", "y", "x"}).to_hash_code()
    assert left == right


@pytest.mark.parametrize("initial, multiplier", [(0, 37), (2, 37), (17, 0), (17, 4)])
def test_rejects_even_or_zero_constants(initial: int, multiplier: int) -> None:
    with pytest.raises(InvalidArgumentError):
        HashCodeBuilder(initial, multiplier)


@dataclass
class Point:
    x: int
    y: int
    label: str = field(default="", compare=False)


class Plain:
    def __init__(self, a: int, b: str) -> None:
        self.a = a
        self.b = b
        self._cache = object()


class Slotted:
    __slots__ = ("a", "b")

    def __init__(self, a: int, b: int) -> None:
        self.a = a
        self.b = b


def test_reflection_uses_dataclass_fields() -> None:
    expected = HashCodeBuilder().append(1).append(2).to_hash_code()
    assert reflection_hash_code(Point(1, 2, "a")) == expected
    assert reflection_hash_code(Point(1, 2, "b")) == expected


def test_reflection_skips_private_and_excluded_attributes() -> None:
    plain = Plain(3, "q")
    assert reflection_hash_code(plain) == HashCodeBuilder().append(3).append("q").to_hash_code()
    assert reflection_hash_code(plain, exclude=["b"]) == HashCodeBuilder().append(3).to_hash_code()


def test_reflection_reads_slots() -> None:
    assert reflection_hash_code(Slotted(4, 5)) == HashCodeBuilder().append(4).append(5).to_hash_code()


def test_reflection_rejects_none() -> None:
    with pytest.raises(InvalidArgumentError):
        reflection_hash_code(None)


def test_nested_dataclass_is_folded_by_fields() -> None:
    first = HashCodeBuilder().append(Point(1, 2)).to_hash_code()
    second = HashCodeBuilder().append(Point(1, 2, "other")).to_hash_code()
    assert first == second


def test_append_super_folds_parent_hash() -> None:
    parent = HashCodeBuilder().append("x").to_hash_code()
    child = HashCodeBuilder().append_super(parent).append(1).to_hash_code()
    assert child == (17 * 37 + parent) * 37 + 1


def test_dicts_with_same_items_hash_equal_regardless_of_order() -> None:
    forward = HashCodeBuilder().append({"a": 1, "b": 2}).to_hash_code()
    backward = HashCodeBuilder().append({"b": 2, "a": 1}).to_hash_code()
    assert forward == backward
    entries = (
        HashCodeBuilder().append("a").append(1).to_hash_code()
        + HashCodeBuilder().append("b").append(2).to_hash_code()
    )
    assert forward == HashCodeBuilder().append_super(entries).to_hash_code()


def test_dict_fold_stays_in_signed_32_bit_range() -> None:
    big = {index: index * 104729 for index in range(500)}
    assert -(2**31) <= HashCodeBuilder().append(big).to_hash_code() < 2**31


@pytest.mark.parametrize("value", ["abc", 5, 2.5, (1, 2)])
def test_reflection_on_builtin_values_has_no_fields(value: object) -> None:
    assert reflection_hash_code(value) == 17
