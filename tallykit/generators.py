"""Random primitives and fixed-width numeric arrays for synthetic test data.

All generators draw from a uniform source on ``[0, 1)``. Any object with a
``random()`` method qualifies; ``numpy.random.Generator`` is the default and
tests substitute fixed sequences. Calls are independent of each other and
share no state beyond the module default source.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional, Protocol, Sequence, Tuple, TypeVar, Union

import numpy as np

from . import consts
from .exceptions import ArgumentError, RangeViolationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class UniformSource(Protocol):
    """Anything that yields floats uniformly distributed on ``[0, 1)``."""

    def random(self) -> float: ...


_default_source: UniformSource = np.random.default_rng()

_FIXED_WIDTH_RANGES: Dict[str, Tuple[type, float, float]] = {
    "i8": (np.int8, consts.I8_MIN, consts.I8_MAX),
    "i16": (np.int16, consts.I16_MIN, consts.I16_MAX),
    "i32": (np.int32, consts.I32_MIN, consts.I32_MAX),
    "u8": (np.uint8, consts.U8_MIN, consts.U8_MAX),
    "u16": (np.uint16, consts.U16_MIN, consts.U16_MAX),
    "u32": (np.uint32, consts.U32_MIN, consts.U32_MAX),
    "f32": (np.float32, consts.F32_MIN, consts.F32_MAX),
}


def reseed(seed: Optional[int] = None) -> None:
    """Replace the module default source with ``numpy.random.default_rng(seed)``."""
    global _default_source
    _default_source = np.random.default_rng(seed)
    logger.debug("Default uniform source reseeded (seed=%r)", seed)


def _uniform(source: Optional[UniformSource]) -> float:
    src = _default_source if source is None else source
    return float(src.random())


def _check_length(length: int) -> int:
    if isinstance(length, bool) or not isinstance(length, (int, np.integer)) or length < 0:
        raise ArgumentError(f"length must be a non-negative integer, got {length!r}")
    return int(length)


def random_boolean(source: Optional[UniformSource] = None) -> bool:
    """Fair coin flip."""
    return _uniform(source) < 0.5


def random_integer(
    min_value: float, max_value: float, source: Optional[UniformSource] = None
) -> int:
    """Uniform integer on the closed interval ``[min_value, max_value]``.

    Fractional bounds are rounded toward the interior (``ceil`` of the
    minimum, ``floor`` of the maximum) before sampling.

    Args:
        min_value (float): Inclusive lower bound.
        max_value (float): Inclusive upper bound.
        source (UniformSource, optional): Randomness source. Defaults to the
            module source.

    Returns:
        int: The sampled integer.

    Raises:
        RangeViolationError: If ``min_value >= max_value`` or if no integer
            lies between the rounded bounds.

    Example:
        >>> 0 <= random_integer(0, 100) <= 100
        True
    """
    if min_value >= max_value:
        raise RangeViolationError(
            f"min_value ({min_value!r}) must be less than max_value ({max_value!r})"
        )
    lo = math.ceil(min_value)
    hi = math.floor(max_value)
    if lo > hi:
        raise RangeViolationError(f"No integer lies in [{min_value!r}, {max_value!r}]")
    # u * span may round up to span when the span nears 2**53
    return min(int(math.floor(_uniform(source) * (hi - lo + 1) + lo)), hi)


def random_float(
    min_value: float, max_value: float, source: Optional[UniformSource] = None
) -> float:
    """Uniform float on the half-open interval ``[min_value, max_value)``.

    Raises:
        RangeViolationError: If ``min_value >= max_value``.
    """
    if min_value >= max_value:
        raise RangeViolationError(
            f"min_value ({min_value!r}) must be less than max_value ({max_value!r})"
        )
    lo = float(min_value)
    hi = float(max_value)
    return lo + _uniform(source) * (hi - lo)


def random_item(items: Sequence[T], source: Optional[UniformSource] = None) -> T:
    """Pick one element of ``items`` uniformly by index.

    Raises:
        ArgumentError: If ``items`` is empty.
    """
    n = len(items)
    if n == 0:
        raise ArgumentError("Cannot pick a random item from an empty sequence")
    index = min(int(_uniform(source) * n), n - 1)
    return items[index]


def random_string(
    length: int,
    alphabet: Union[str, Sequence[str]],
    source: Optional[UniformSource] = None,
) -> str:
    """Build a string of exactly ``length`` draws from ``alphabet``.

    Args:
        length (int): Number of draws.
        alphabet (str | Sequence[str]): A string, treated as its individual
            characters, or an explicit list of strings.
        source (UniformSource, optional): Randomness source.

    Raises:
        ArgumentError: If ``length`` is negative or ``alphabet`` is empty.

    Example:
        >>> set(random_string(24, "ABCD")) <= set("ABCD")
        True
    """
    n = _check_length(length)
    pool = list(alphabet)
    if not pool:
        raise ArgumentError("alphabet must contain at least one entry")
    return "".join(random_item(pool, source=source) for _ in range(n))


def random_integer_array(
    length: int,
    min_value: float,
    max_value: float,
    source: Optional[UniformSource] = None,
) -> List[int]:
    """``length`` independent draws of ``random_integer(min_value, max_value)``."""
    n = _check_length(length)
    return [random_integer(min_value, max_value, source=source) for _ in range(n)]


def random_float_array(
    length: int,
    min_value: float,
    max_value: float,
    source: Optional[UniformSource] = None,
) -> List[float]:
    """``length`` independent draws of ``random_float(min_value, max_value)``."""
    n = _check_length(length)
    return [random_float(min_value, max_value, source=source) for _ in range(n)]


def random_typed_array(
    length: int, kind: str, source: Optional[UniformSource] = None
) -> np.ndarray:
    """Array of ``length`` values spanning the full range of a fixed-width type.

    Args:
        length (int): Number of values.
        kind (str): One of ``i8``, ``i16``, ``i32``, ``u8``, ``u16``, ``u32``
            or ``f32``.
        source (UniformSource, optional): Randomness source.

    Returns:
        numpy.ndarray: Array with the matching dtype (``int8`` ... ``uint32``,
        ``float32``).

    Raises:
        ArgumentError: If ``kind`` is unknown or ``length`` is invalid.
    """
    entry = _FIXED_WIDTH_RANGES.get(kind)
    if entry is None:
        raise ArgumentError(
            f"Unknown array kind '{kind}'; expected one of {sorted(_FIXED_WIDTH_RANGES)}"
        )
    dtype, lo, hi = entry
    if kind == "f32":
        values = random_float_array(length, lo, hi, source=source)
    else:
        values = random_integer_array(length, lo, hi, source=source)
    return np.asarray(values, dtype=dtype)


def random_i8(source: Optional[UniformSource] = None) -> int:
    """Uniform integer on ``[-128, 127]``."""
    return random_integer(consts.I8_MIN, consts.I8_MAX, source=source)


def random_i16(source: Optional[UniformSource] = None) -> int:
    """Uniform integer on ``[-32768, 32767]``."""
    return random_integer(consts.I16_MIN, consts.I16_MAX, source=source)


def random_i32(source: Optional[UniformSource] = None) -> int:
    """Uniform integer on ``[-2147483648, 2147483647]``."""
    return random_integer(consts.I32_MIN, consts.I32_MAX, source=source)


def random_u8(source: Optional[UniformSource] = None) -> int:
    """Uniform integer on ``[0, 255]``."""
    return random_integer(consts.U8_MIN, consts.U8_MAX, source=source)


def random_u16(source: Optional[UniformSource] = None) -> int:
    """Uniform integer on ``[0, 65535]``."""
    return random_integer(consts.U16_MIN, consts.U16_MAX, source=source)


def random_u32(source: Optional[UniformSource] = None) -> int:
    """Uniform integer on ``[0, 4294967295]``."""
    return random_integer(consts.U32_MIN, consts.U32_MAX, source=source)


def random_array_i8(length: int, source: Optional[UniformSource] = None) -> np.ndarray:
    """``int8`` array of ``length`` values on ``[-128, 127]``."""
    return random_typed_array(length, "i8", source=source)


def random_array_i16(length: int, source: Optional[UniformSource] = None) -> np.ndarray:
    """``int16`` array of ``length`` values on ``[-32768, 32767]``."""
    return random_typed_array(length, "i16", source=source)


def random_array_i32(length: int, source: Optional[UniformSource] = None) -> np.ndarray:
    """``int32`` array of ``length`` values on ``[-2147483648, 2147483647]``."""
    return random_typed_array(length, "i32", source=source)


def random_array_u8(length: int, source: Optional[UniformSource] = None) -> np.ndarray:
    """``uint8`` array of ``length`` values on ``[0, 255]``."""
    return random_typed_array(length, "u8", source=source)


def random_array_u16(length: int, source: Optional[UniformSource] = None) -> np.ndarray:
    """``uint16`` array of ``length`` values on ``[0, 65535]``."""
    return random_typed_array(length, "u16", source=source)


def random_array_u32(length: int, source: Optional[UniformSource] = None) -> np.ndarray:
    """``uint32`` array of ``length`` values on ``[0, 4294967295]``."""
    return random_typed_array(length, "u32", source=source)


def random_array_f32(length: int, source: Optional[UniformSource] = None) -> np.ndarray:
    """``float32`` array of ``length`` values on ``[-3.4e38, 3.4e38)``."""
    return random_typed_array(length, "f32", source=source)
