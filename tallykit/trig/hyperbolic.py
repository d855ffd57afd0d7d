"""Inverse hyperbolic functions (area functions).

Input outside a function's real domain returns ``nan`` rather than raising,
matching the behaviour of the reciprocal and inverse trigonometric helpers.
"""

from __future__ import annotations

import math


def arsinh(x: float) -> float:
    """Area hyperbolic sine. Domain: all reals."""
    return math.asinh(x)


def arcosh(x: float) -> float:
    """Area hyperbolic cosine. Domain: ``x >= 1``."""
    if not x >= 1:
        return math.nan
    return math.acosh(x)


def artanh(x: float) -> float:
    """Area hyperbolic tangent. Domain: ``-1 < x < 1``."""
    if not -1 < x < 1:
        return math.nan
    return 0.5 * math.log((1.0 + x) / (1.0 - x))


def arcsch(x: float) -> float:
    """Area hyperbolic cosecant. Domain: ``x != 0``."""
    if x == 0 or math.isnan(x):
        return math.nan
    return math.asinh(1.0 / x)


def arsech(x: float) -> float:
    """Area hyperbolic secant. Domain: ``0 < x <= 1``."""
    if not 0 < x <= 1:
        return math.nan
    return math.log((1.0 + math.sqrt(1.0 - x * x)) / x)


def arcoth(x: float) -> float:
    """Area hyperbolic cotangent. Domain: ``|x| > 1``."""
    if not abs(x) > 1:
        return math.nan
    return 0.5 * math.log((x + 1.0) / (x - 1.0))
