"""Discrete frequency distributions over sequences of hashable values.

Every table is a plain ``dict`` whose iteration order is the order in which
values first occur in the input. Tables are built fresh on each call and are
never mutated afterwards.
"""

from __future__ import annotations

import warnings
from collections import Counter
from typing import Dict, Hashable, Mapping, Optional, Sequence, TypeVar

T = TypeVar("T", bound=Hashable)


def absolute_frequency(items: Sequence[T]) -> Dict[T, int]:
    """Count how often each distinct value occurs.

    Args:
        items (Sequence): Observations. Values must be hashable.

    Returns:
        dict: Mapping of value to count in first-occurrence order. Empty input
        yields an empty dict.

    Example:
        >>> absolute_frequency("the best of the best".split())
        {'the': 2, 'best': 2, 'of': 1}
    """
    return dict(Counter(items))


def _resolve_table(
    items: Optional[Sequence[T]], table: Optional[Mapping[T, int]]
) -> Mapping[T, int]:
    if table is None:
        return absolute_frequency(items if items is not None else [])
    if items is not None and sum(table.values()) != len(items):
        warnings.warn(
            "Supplied frequency table does not account for every observation "
            f"({sum(table.values())} counted, {len(items)} given).",
            RuntimeWarning,
            stacklevel=3,
        )
    return table


def cumulative_frequency(
    items: Optional[Sequence[T]], table: Optional[Mapping[T, int]] = None
) -> Dict[T, int]:
    """Running total of counts in the iteration order of the frequency table.

    Args:
        items (Sequence | None): Observations. May be ``None`` when ``table``
            is supplied.
        table (Mapping, optional): Precomputed absolute frequencies for the
            same observations. Reused as-is instead of recounting.

    Returns:
        dict: Mapping of value to the number of observations up to and
        including that value's position in the table.

    Note:
        A supplied table whose total disagrees with ``len(items)`` is accepted
        and a ``RuntimeWarning`` is emitted.
    """
    absolute = _resolve_table(items, table)
    cumulative: Dict[T, int] = {}
    running = 0
    for value, count in absolute.items():
        running += count
        cumulative[value] = running
    return cumulative


def relative_frequency(
    items: Optional[Sequence[T]], table: Optional[Mapping[T, int]] = None
) -> Dict[T, float]:
    """Empirical probability of each value.

    Each count is divided by the total number of observations, so the values
    sum to 1.0 up to floating-point rounding.

    >>> relative_frequency([1, 1, 1, 1, 2, 3, 4, 5])[1]
    0.5
    """
    absolute = _resolve_table(items, table)
    total = sum(absolute.values())
    if total == 0:
        return {}
    return {value: count / total for value, count in absolute.items()}
