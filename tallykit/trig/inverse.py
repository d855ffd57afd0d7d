"""Inverse reciprocal trigonometric functions returning radians."""

from __future__ import annotations

import math


def arccot(x: float) -> float:
    """Inverse cotangent, ``atan(1/x)``; ``arccot(0)`` is pi/2."""
    if x == 0:
        return math.pi / 2.0
    return math.atan(1.0 / x)


def arccsc(x: float) -> float:
    """Inverse cosecant, ``asin(1/x)`` for ``|x| >= 1``, otherwise ``nan``."""
    if math.isnan(x) or abs(x) < 1:
        return math.nan
    return math.asin(1.0 / x)


def arcsec(x: float) -> float:
    """Inverse secant, ``acos(1/x)`` for ``|x| >= 1``, otherwise ``nan``."""
    if math.isnan(x) or abs(x) < 1:
        return math.nan
    return math.acos(1.0 / x)
