"""Equality checks, chunking and ordering helpers for in-memory sequences."""

from __future__ import annotations

import math
from typing import Any, Callable, Dict, List, Mapping, Sequence, Sized, TypeVar

from .exceptions import ArgumentError

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K")
V = TypeVar("V")


def _validate_chunk_size(max_size: float) -> int:
    if isinstance(max_size, bool) or not isinstance(max_size, (int, float)):
        raise ArgumentError(f"Chunk size must be numeric, got {type(max_size)}")
    if not math.isfinite(max_size) or max_size < 1 or not float(max_size).is_integer():
        raise ArgumentError(f"Chunk size must be a positive integer, got {max_size!r}")
    return int(max_size)


def are_all_equal(items: Sequence[Any]) -> bool:
    """Return whether every item equals the first one.

    An empty sequence is trivially uniform and returns ``True``.
    """
    return all(item == items[0] for item in items)


def are_all_approx_equal(numbers: Sequence[float]) -> bool:
    """Return whether all numbers round to the same integer."""
    return are_all_equal([round(n) for n in numbers])


def are_all_same_length(items: Sequence[Sized]) -> bool:
    """Return whether every item has the length of the first one."""
    return all(len(item) == len(items[0]) for item in items)


def are_primitive_arrays_equal(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """Element-wise equality of two flat sequences of primitives."""
    return len(a) == len(b) and all(x == y for x, y in zip(a, b))


def chunk(items: Sequence[T], max_size: int) -> List[List[T]]:
    """Split ``items`` into consecutive sub-lists of at most ``max_size``.

    Leftover items form a shorter final chunk.

    Args:
        items (Sequence): Items to split.
        max_size (int): Maximum chunk length. Integral floats such as ``3.0``
            are accepted.

    Returns:
        list[list]: The chunks. When ``max_size >= len(items)`` a single chunk
        holding every item is returned.

    Raises:
        ArgumentError: If ``max_size`` is smaller than 1 or not integral.

    Example:
        >>> chunk([1, 2, 3, 4, 5, 6, 7, 8, 9], 4)
        [[1, 2, 3, 4], [5, 6, 7, 8], [9]]
    """
    size = _validate_chunk_size(max_size)
    if size >= len(items):
        return [list(items)]
    return [list(items[i : i + size]) for i in range(0, len(items), size)]


def chunk_string(value: str, max_size: int) -> List[str]:
    """Split a string into substrings of at most ``max_size`` characters."""
    size = _validate_chunk_size(max_size)
    return [value[i : i + size] for i in range(0, len(value), size)]


def for_each_reverse(items: Sequence[T], iter_fn: Callable[[T, int, Sequence[T]], Any]) -> None:
    """Call ``iter_fn(item, index, items)`` from the last item to the first."""
    for i in range(len(items) - 1, -1, -1):
        iter_fn(items[i], i, items)


def map_reverse(items: Sequence[T], iter_fn: Callable[[T, int, Sequence[T]], U]) -> List[U]:
    """Like ``for_each_reverse`` but collect the return values."""
    return [iter_fn(items[i], i, items) for i in range(len(items) - 1, -1, -1)]


def sort_nums_asc(dataset: List[float]) -> List[float]:
    """Sort ``dataset`` in place from least to greatest and return it."""
    dataset.sort()
    return dataset


def sort_nums_desc(dataset: List[float]) -> List[float]:
    """Sort ``dataset`` in place from greatest to least and return it."""
    dataset.sort(reverse=True)
    return dataset


def invert_map(mapping: Mapping[K, V]) -> Dict[V, K]:
    """Swap keys and values. Later keys win when values collide."""
    return {value: key for key, value in mapping.items()}
