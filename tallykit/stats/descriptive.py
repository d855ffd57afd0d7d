"""Descriptive statistics over finite numeric samples.

Empty input never raises here: numeric summaries return ``math.nan`` and
``mode`` returns ``None``. Inputs are converted with ``numpy.asarray`` and
are never reordered in place.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Hashable, List, Optional, Sequence, TypeVar

import numpy as np

from ..sequences import are_all_equal
from .frequency import absolute_frequency

T = TypeVar("T", bound=Hashable)


def _as_float_array(numbers: Sequence[float]) -> np.ndarray:
    return np.asarray(numbers, dtype=float).ravel()


def get_sum(numbers: Sequence[float]) -> float:
    """Total of the series; ``0`` for an empty series."""
    return sum(numbers, 0)


def get_product(numbers: Sequence[float]) -> float:
    """Multiplicative total of the series; ``1`` for an empty series."""
    return math.prod(numbers)


def arithmetic_mean(numbers: Sequence[float]) -> float:
    """Sum divided by count, or ``nan`` for an empty sample."""
    arr = _as_float_array(numbers)
    if arr.size == 0:
        return math.nan
    return float(np.sum(arr) / arr.size)


def median(numbers: Sequence[float]) -> float:
    """Middle value of the sorted sample.

    For an even-length sample the two middle values are averaged, so
    ``median([2, 3, 5, 7])`` is ``4.0`` and ``median([1, 3, 5, 7, 10])`` is
    ``5.0``.

    Args:
        numbers (Sequence[float]): Sample values.

    Returns:
        float: The median, the sole element of a singleton sample, or ``nan``
        for an empty sample.

    Note:
        Sorting happens on a private copy; the caller's sequence keeps its
        order and may be shared between threads.
    """
    arr = np.sort(_as_float_array(numbers))
    n = int(arr.size)
    if n == 0:
        return math.nan
    half = n // 2
    if n % 2:
        return float(arr[half])
    return float((arr[half - 1] + arr[half]) / 2.0)


def mode(items: Sequence[T]) -> Optional[List[T]]:
    """Return the most frequent value or values.

    Returns:
        list | None:
        - ``None`` for an empty sequence,
        - ``None`` for a uniform distribution where every distinct value
          occurs equally often (including all-distinct input),
        - ``[x]`` for a single-item sequence,
        - otherwise every value whose count equals the maximum, in
          first-occurrence order (one item when unimodal, several when
          multimodal).

    Example:
        >>> mode([1, 2, 3, 3, 4, 4])
        [3, 4]
    """
    if len(items) == 0:
        return None
    if len(items) == 1:
        return [items[0]]

    table = absolute_frequency(items)
    counts = list(table.values())
    if are_all_equal(counts):
        return None

    top = max(counts)
    return [value for value, count in table.items() if count == top]


def mean_signed_deviation(numbers: Sequence[float]) -> float:
    """Mean of ``x - mean`` without taking absolute values.

    This reduces to zero (up to rounding) for every non-empty sample. It is
    the quantity older releases returned under the name
    ``mean_absolute_deviation``.
    """
    arr = _as_float_array(numbers)
    return arithmetic_mean(arr - arithmetic_mean(arr))


def mean_absolute_deviation(numbers: Sequence[float]) -> float:
    """Mean of ``|x - mean|``; ``nan`` for an empty sample."""
    arr = _as_float_array(numbers)
    return arithmetic_mean(np.abs(arr - arithmetic_mean(arr)))


def median_absolute_deviation(numbers: Sequence[float]) -> float:
    """Median of ``|x - median|``; ``nan`` for an empty sample."""
    arr = _as_float_array(numbers)
    return median(np.abs(arr - median(arr)))


def variance(numbers: Sequence[float]) -> float:
    """Population variance (divisor ``n``)."""
    arr = _as_float_array(numbers)
    return arithmetic_mean((arr - arithmetic_mean(arr)) ** 2)


def standard_deviation(numbers: Sequence[float]) -> float:
    """Population standard deviation (divisor ``n``).

    >>> standard_deviation([2, 4, 4, 4, 5, 5, 7, 9])
    2.0
    """
    return math.sqrt(variance(numbers))


def summarize(numbers: Sequence[float]) -> Dict[str, Any]:
    """Collect the descriptive statistics of a numeric sample.

    Args:
        numbers (Sequence[float]): Sample values.

    Returns:
        dict[str, Any]: Keys ``n``, ``sum``, ``min``, ``max``, ``mean``,
        ``median``, ``mode``, ``variance``, ``std``, ``mean_abs_dev`` and
        ``median_abs_dev``. ``min``/``max`` are ``nan`` and ``mode`` is
        ``None`` for an empty sample.
    """
    values = list(numbers)
    arr = _as_float_array(values)
    n = int(arr.size)
    return {
        "n": n,
        "sum": float(get_sum(values)),
        "min": float(np.min(arr)) if n else math.nan,
        "max": float(np.max(arr)) if n else math.nan,
        "mean": arithmetic_mean(arr),
        "median": median(arr),
        "mode": mode(values),
        "variance": variance(arr),
        "std": standard_deviation(arr),
        "mean_abs_dev": mean_absolute_deviation(arr),
        "median_abs_dev": median_absolute_deviation(arr),
    }
