"""Closed-form probability density functions."""

from __future__ import annotations

import math

from ..bounds import is_between_inclusive
from ..exceptions import ArgumentError, DivideByZeroError


def normal_pdf(x: float, location: float = 0.0, scale: float = 1.0) -> float:
    """Density of the normal distribution ``N(location, scale**2)`` at ``x``.

    Args:
        x (float): Point at which to evaluate the density.
        location (float, optional): Mean. Defaults to ``0.0``.
        scale (float, optional): Standard deviation. Defaults to ``1.0``.

    Returns:
        float: ``exp(-(x - location)**2 / (2 * scale**2)) / (scale * sqrt(2*pi))``.

    Raises:
        ArgumentError: If ``scale`` is not strictly positive.
    """
    if not scale > 0:
        raise ArgumentError(f"scale must be > 0, got {scale!r}")
    z = (x - location) / scale
    return math.exp(-0.5 * z * z) / (scale * math.sqrt(2.0 * math.pi))


def uniform_pdf(x: float, a: float, b: float) -> float:
    """Density of the continuous uniform distribution on ``[a, b]`` at ``x``.

    Returns ``0`` outside the interval and exactly ``1`` on the unit interval
    ``[0, 1]``.

    Raises:
        RangeViolationError: If ``a > b``.
        DivideByZeroError: If ``a == b`` (degenerate interval).
    """
    inside = is_between_inclusive(x, a, b)
    if a == b:
        raise DivideByZeroError(f"Degenerate interval [{a}, {b}] has no density")
    if not inside:
        return 0.0
    if a == 0 and b == 1:
        return 1.0
    return 1.0 / (b - a)
