"""Small string transforms and n-gram partitioning."""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, TypeVar

from .exceptions import ArgumentError, RangeViolationError

T = TypeVar("T")

ELLIPSIS = "…"


def string_is_null_or_empty(value: Optional[str]) -> bool:
    """Return ``True`` for ``None`` or ``""``."""
    return value is None or value == ""


def truncate_string(value: str, max_length: int) -> str:
    """Cut ``value`` to ``max_length`` characters, ending with an ellipsis.

    >>> truncate_string("Hello World", 5)
    'Hell…'
    """
    if max_length < 1:
        raise ArgumentError(f"max_length must be >= 1, got {max_length}")
    if len(value) <= max_length:
        return value
    return value[: max_length - 1] + ELLIPSIS


def truncate_string_middle(value: str, max_length: int, separator: str = ELLIPSIS) -> str:
    """Keep both ends of ``value`` and replace the middle with ``separator``."""
    if len(value) <= max_length:
        return value
    chars_to_show = max_length - len(separator)
    if chars_to_show < 0:
        raise ArgumentError(
            f"max_length {max_length} cannot fit separator of length {len(separator)}"
        )
    front = math.ceil(chars_to_show / 2)
    back = chars_to_show // 2
    return value[:front] + separator + value[len(value) - back :]


def ngrams(items: Sequence[T], n: int) -> List[List[T]]:
    """Partition ``items`` into overlapping windows of length ``n``.

    Args:
        items (Sequence): Tokens, characters, residues or any other items.
        n (int): Window size.

    Returns:
        list[list]: ``len(items) - n + 1`` windows in order.

    Raises:
        ArgumentError: If ``n < 1``.
        RangeViolationError: If ``n`` is larger than ``len(items)``.

    Example:
        >>> ngrams("GGTATC", 3)
        [['G', 'G', 'T'], ['G', 'T', 'A'], ['T', 'A', 'T'], ['A', 'T', 'C']]
    """
    if n < 1:
        raise ArgumentError(f"n-gram size must be >= 1, got {n}")
    if n > len(items):
        raise RangeViolationError(
            f"n-gram size {n} exceeds the number of items ({len(items)})"
        )
    return [list(items[i : i + n]) for i in range(len(items) - n + 1)]
