"""Closed-interval checks and clamping to fixed-width numeric ranges."""

from __future__ import annotations

from . import consts
from .exceptions import RangeViolationError


def _check_interval(min_value: float, max_value: float) -> None:
    if min_value > max_value:
        raise RangeViolationError(
            f"Minimum boundary {min_value!r} is greater than maximum boundary {max_value!r}"
        )


def is_between_inclusive(value: float, min_value: float, max_value: float) -> bool:
    """Return whether ``min_value <= value <= max_value``.

    Args:
        value (float): Value to test.
        min_value (float): Inclusive lower boundary.
        max_value (float): Inclusive upper boundary.

    Returns:
        bool: ``True`` when ``value`` lies in the closed interval.

    Raises:
        RangeViolationError: If ``min_value > max_value``.
    """
    _check_interval(min_value, max_value)
    return min_value <= value <= max_value


def clamp(value: float, min_value: float, max_value: float) -> float:
    """Force ``value`` into the closed interval ``[min_value, max_value]``.

    Raises:
        RangeViolationError: If ``min_value > max_value``.
    """
    _check_interval(min_value, max_value)
    return min(max(value, min_value), max_value)


def clamp_i8(value: float) -> float:
    """Clamp to ``[-128, 127]``."""
    return clamp(value, consts.I8_MIN, consts.I8_MAX)


def clamp_i16(value: float) -> float:
    """Clamp to ``[-32768, 32767]``."""
    return clamp(value, consts.I16_MIN, consts.I16_MAX)


def clamp_i32(value: float) -> float:
    """Clamp to ``[-2147483648, 2147483647]``."""
    return clamp(value, consts.I32_MIN, consts.I32_MAX)


def clamp_u8(value: float) -> float:
    """Clamp to ``[0, 255]``."""
    return clamp(value, consts.U8_MIN, consts.U8_MAX)


def clamp_u16(value: float) -> float:
    """Clamp to ``[0, 65535]``."""
    return clamp(value, consts.U16_MIN, consts.U16_MAX)


def clamp_u32(value: float) -> float:
    """Clamp to ``[0, 4294967295]``."""
    return clamp(value, consts.U32_MIN, consts.U32_MAX)


def clamp_f32(value: float) -> float:
    """Clamp to the finite binary32 range ``[-3.4e38, 3.4e38]``."""
    return clamp(value, consts.F32_MIN, consts.F32_MAX)
