import pytest

from tallykit.exceptions import ArgumentError, RangeViolationError
from tallykit.strings import (
    ngrams,
    string_is_null_or_empty,
    truncate_string,
    truncate_string_middle,
)


def test_string_is_null_or_empty():
    assert string_is_null_or_empty(None)
    assert string_is_null_or_empty("")
    assert not string_is_null_or_empty("Hello World!")
    assert not string_is_null_or_empty(" ")


def test_truncate_string():
    assert truncate_string("Hello World", 5) == "Hell…"
    assert truncate_string("Hi", 5) == "Hi"
    with pytest.raises(ArgumentError):
        truncate_string("Hello", 0)


def test_truncate_string_middle():
    assert truncate_string_middle("abcdefghij", 5) == "ab…ij"
    assert truncate_string_middle("abcdefghij", 6, "..") == "ab..ij"
    assert truncate_string_middle("short", 10) == "short"


def test_ngrams_of_numbers():
    assert ngrams([1, 2, 3, 4], 2) == [[1, 2], [2, 3], [3, 4]]


def test_ngrams_of_words():
    words = "the fox jumped over the fence".split(" ")
    assert ngrams(words, 3) == [
        ["the", "fox", "jumped"],
        ["fox", "jumped", "over"],
        ["jumped", "over", "the"],
        ["over", "the", "fence"],
    ]


def test_ngrams_of_codons():
    assert len(ngrams("GGTATCGTG", 3)) == 7


def test_ngrams_errors():
    with pytest.raises(RangeViolationError):
        ngrams([1, 2], 3)
    with pytest.raises(ArgumentError):
        ngrams([1, 2], 0)
