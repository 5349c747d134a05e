from __future__ import annotations

import pytest

from fuzzykit.text import (
    CharRange,
    CharSet,
    contains_any,
    count,
    delete,
    keep,
    parse_definition,
    squeeze,
)


def test_parse_definition_forms() -> None:
    assert parse_definition("a-e") == [CharRange("a", "e")]
    assert parse_definition("^a-e") == [CharRange("a", "e", negated=True)]
    assert parse_definition("^a") == [CharRange.single("a", negated=True)]
    assert parse_definition("abc") == [
        CharRange.single("a"),
        CharRange.single("b"),
        CharRange.single("c"),
    ]


def test_literal_caret_and_dash() -> None:
    assert parse_definition("^") == [CharRange.single("^")]
    assert parse_definition("a-") == [CharRange.single("a"), CharRange.single("-")]
    assert parse_definition("-") == [CharRange.single("-")]


def test_reversed_range_is_normalised() -> None:
    char_range = CharRange("e", "a")
    assert (char_range.start, char_range.end) == ("a", "e")
    assert list(char_range) == ["a", "b", "c", "d", "e"]
    assert str(char_range) == "a-e"


def test_negated_range_membership() -> None:
    charset = CharSet("^a-e")
    assert "z" in charset
    assert "c" not in charset
    assert "ab" not in charset


def test_charset_of_is_cached_and_comparable() -> None:
    assert CharSet.of("a-z", "0-9") is CharSet.of("a-z", "0-9")
    assert CharSet("ab") == CharSet("ba")
    assert not CharSet("", None)


def test_count() -> None:
    assert count("hello", "k-p") == 3
    assert count("hello", "a-e") == 1
    assert count("hello", "^l") == 3
    assert count("hello", "a-e", "l-p") == 4
    assert count(None, "a") == 0
    assert count("hello") == 0
    assert count("hello", "", None) == 0


def test_contains_any() -> None:
    assert contains_any("hello", "k-p")
    assert not contains_any("hello", "a-d")
    assert not contains_any("", "a-z")
    assert not contains_any("hello", "")


def test_delete() -> None:
    assert delete("hello", "hl") == "eo"
    assert delete("hello", "le") == "ho"
    assert delete("hello", "^l") == "ll"
    assert delete("hello", None) == "hello"
    assert delete(None, "a") is None
    assert delete("", "a") == ""


def test_keep() -> None:
    assert keep("hello", "hl") == "hll"
    assert keep("hello", "le") == "ell"
    assert keep("hello", "^a-h") == "llo"
    assert keep(None, "a") is None
    assert keep("", "a") == ""
    assert keep("hello", "") == ""


@pytest.mark.parametrize(
    "value, definition, expected",
    [
        ("hello", "k-p", "helo"),
        ("hello", "a-e", "hello"),
        ("bookkeeper", "a-z", "bokeper"),
        ("aabbcc", "b", "aabcc"),
        ("  spaced   out ", " ", " spaced out "),
    ],
)
def test_squeeze(value: str, definition: str, expected: str) -> None:
    assert squeeze(value, definition) == expected


def test_squeeze_noops() -> None:
    assert squeeze(None, "a") is None
    assert squeeze("", "a") == ""
    assert squeeze("hello", "") == "hello"
