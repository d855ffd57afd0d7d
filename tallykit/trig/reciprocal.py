"""Reciprocal trigonometric functions of an angle in radians."""

from __future__ import annotations

import math

from ..consts import PI_OVER_FOUR, PI_OVER_TWO

_SNAP_TOL = 1e-12


def _near(x: float, target: float) -> bool:
    return math.isclose(x, target, rel_tol=0.0, abs_tol=_SNAP_TOL)


def _is_integral(x: float) -> bool:
    return math.isfinite(x) and _near(x, round(x))


def _is_nonzero_pi_multiple(x: float) -> bool:
    ratio = x / math.pi
    return math.isfinite(ratio) and round(ratio) != 0 and _is_integral(ratio)


def csc(x: float) -> float:
    """Cosecant, ``1 / sin(x)``.

    Returns ``inf`` at ``x == 0`` and ``nan`` at other multiples of pi or for
    non-finite input. Exact values are returned at pi/4 and pi/2.
    """
    if not math.isfinite(x):
        return math.nan
    if x == 0:
        return math.inf
    if _is_nonzero_pi_multiple(x):
        return math.nan
    if _near(x, PI_OVER_FOUR):
        return math.sqrt(2.0)
    if _near(x, PI_OVER_TWO):
        return 1.0
    return 1.0 / math.sin(x)


def sec(x: float) -> float:
    """Secant, ``1 / cos(x)``; ``nan`` where ``x / pi + 1/2`` is an integer."""
    if not math.isfinite(x) or _is_integral(x / math.pi + 0.5):
        return math.nan
    if x == 0:
        return 1.0
    if _near(x, PI_OVER_FOUR):
        return math.sqrt(2.0)
    return 1.0 / math.cos(x)


def cot(x: float) -> float:
    """Cotangent, ``1 / tan(x)``.

    ``cot(0)`` is ``inf``; other multiples of pi, infinities and ``nan`` give
    ``nan``. ``cot(pi/4) == 1`` and ``cot(pi/2) == 0`` exactly.
    """
    if x == 0:
        return math.inf
    if not math.isfinite(x) or _is_nonzero_pi_multiple(x):
        return math.nan
    if _near(x, PI_OVER_FOUR):
        return 1.0
    if _near(x, PI_OVER_TWO):
        return 0.0
    return 1.0 / math.tan(x)
