import pytest

from tallykit.exceptions import ArgumentError
from tallykit.sequences import (
    are_all_approx_equal,
    are_all_equal,
    are_all_same_length,
    are_primitive_arrays_equal,
    chunk,
    chunk_string,
    for_each_reverse,
    invert_map,
    map_reverse,
    sort_nums_asc,
    sort_nums_desc,
)


class TestEquality:
    def test_are_all_equal(self):
        assert are_all_equal([2, 2, 2])
        assert not are_all_equal([2, 2, 3])
        assert are_all_equal([])

    def test_are_all_approx_equal(self):
        assert are_all_approx_equal([1.9, 2.1, 2.4])
        assert not are_all_approx_equal([1.4, 2.1])

    def test_are_all_same_length(self):
        assert are_all_same_length(["ab", [1, 2], (3, 4)])
        assert not are_all_same_length(["ab", "abc"])

    def test_are_primitive_arrays_equal(self):
        assert are_primitive_arrays_equal([1, "a", None], [1, "a", None])
        assert not are_primitive_arrays_equal([1, 2], [1, 2, 3])
        assert not are_primitive_arrays_equal([1, 2], [2, 1])


class TestChunk:
    def test_even_split(self):
        assert chunk(list(range(1, 10)), 3) == [[1, 2, 3], [4, 5, 6], [7, 8, 9]]

    def test_leftover_chunk(self):
        assert chunk(list(range(1, 10)), 4) == [[1, 2, 3, 4], [5, 6, 7, 8], [9]]

    def test_size_at_least_length(self):
        assert chunk([1, 2], 5) == [[1, 2]]

    def test_integral_float_size(self):
        assert chunk([1, 2, 3, 4], 2.0) == [[1, 2], [3, 4]]

    @pytest.mark.parametrize("size", [0, -1, 1.5, float("nan"), "3"])
    def test_invalid_size_raises(self, size):
        with pytest.raises(ArgumentError):
            chunk(list(range(1, 10)), size)

    def test_chunk_string(self):
        assert chunk_string("abcdefg", 3) == ["abc", "def", "g"]
        assert chunk_string("", 3) == []
        with pytest.raises(ArgumentError):
            chunk_string("abc", 0)


def test_reverse_iteration():
    seen = []
    for_each_reverse(["a", "b", "c"], lambda item, i, items: seen.append((i, item)))
    assert seen == [(2, "c"), (1, "b"), (0, "a")]
    assert map_reverse([1, 2, 3], lambda item, i, items: item * 10) == [30, 20, 10]


def test_sorting_in_place():
    data = [3, 1, 2]
    assert sort_nums_asc(data) is data
    assert data == [1, 2, 3]
    assert sort_nums_desc(data) == [3, 2, 1]


def test_invert_map():
    assert invert_map({"a": 1, "b": 2}) == {1: "a", 2: "b"}
