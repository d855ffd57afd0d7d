"""Laws of sines and cosines and solving triangles from partial data.

Angles passed to and returned from the ``solve_*`` functions are in degrees;
``law_of_cosines`` and ``law_of_sines`` take radians like ``math.sin``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..exceptions import ArgumentError, DivideByZeroError, RangeViolationError


@dataclass(frozen=True)
class TriangleSolution:
    """A fully solved triangle.

    ``side1`` is opposite ``angle1``, ``side2`` opposite ``angle2`` and
    ``side3`` opposite ``angle3``. Angles are in degrees.
    """

    angle1: float
    angle2: float
    angle3: float
    side1: float
    side2: float
    side3: float

    @property
    def perimeter(self) -> float:
        return self.side1 + self.side2 + self.side3


def law_of_cosines(side1: float, side2: float, angle: float) -> float:
    """Length of the side opposite ``angle`` (radians) between two sides."""
    return math.sqrt(side1 * side1 + side2 * side2 - 2.0 * side1 * side2 * math.cos(angle))


def law_of_sines(angle1: float, angle2: float, side: float) -> float:
    """Side opposite ``angle1`` given ``side`` opposite ``angle2`` (radians).

    Raises:
        DivideByZeroError: If ``sin(angle2)`` is zero.
    """
    denominator = math.sin(angle2)
    if denominator == 0:
        raise DivideByZeroError(f"sin({angle2!r}) is zero")
    return side * (math.sin(angle1) / denominator)


def _third_angle(angle1: float, angle2: float) -> float:
    if angle1 <= 0 or angle2 <= 0:
        raise RangeViolationError(
            f"Triangle angles must be positive, got {angle1!r} and {angle2!r}"
        )
    angle3 = 180.0 - angle1 - angle2
    if angle3 <= 0:
        raise RangeViolationError(
            f"Angles {angle1!r} and {angle2!r} leave no room for a third angle"
        )
    return angle3


def _check_side(side: float) -> None:
    if not (math.isfinite(side) and side > 0):
        raise ArgumentError(f"Triangle sides must be positive and finite, got {side!r}")


def solve_aas(angle1: float, angle2: float, side1: float) -> TriangleSolution:
    """Solve a triangle from two angles and the side opposite ``angle1``.

    Raises:
        RangeViolationError: If the angles are non-positive or sum to 180
            degrees or more.
        ArgumentError: If ``side1`` is not positive.
    """
    angle3 = _third_angle(angle1, angle2)
    _check_side(side1)
    ratio = side1 / math.sin(math.radians(angle1))
    return TriangleSolution(
        angle1=float(angle1),
        angle2=float(angle2),
        angle3=angle3,
        side1=float(side1),
        side2=ratio * math.sin(math.radians(angle2)),
        side3=ratio * math.sin(math.radians(angle3)),
    )


def solve_asa(angle1: float, side3: float, angle2: float) -> TriangleSolution:
    """Solve a triangle from two angles and the side between them.

    The included side lies opposite the third angle, hence ``side3``.
    """
    angle3 = _third_angle(angle1, angle2)
    _check_side(side3)
    ratio = side3 / math.sin(math.radians(angle3))
    return TriangleSolution(
        angle1=float(angle1),
        angle2=float(angle2),
        angle3=angle3,
        side1=ratio * math.sin(math.radians(angle1)),
        side2=ratio * math.sin(math.radians(angle2)),
        side3=float(side3),
    )


def solve_sss(side1: float, side2: float, side3: float) -> TriangleSolution:
    """Solve a triangle from its three sides using the law of cosines.

    Raises:
        ArgumentError: If any side is not positive or the sides violate the
            strict triangle inequality.
    """
    for side in (side1, side2, side3):
        _check_side(side)
    longest = max(side1, side2, side3)
    if longest >= side1 + side2 + side3 - longest:
        raise ArgumentError(
            f"Sides {side1!r}, {side2!r}, {side3!r} violate the triangle inequality"
        )

    def _opposite(a: float, b: float, c: float) -> float:
        cos_a = (b * b + c * c - a * a) / (2.0 * b * c)
        return math.degrees(math.acos(max(-1.0, min(1.0, cos_a))))

    angle1 = _opposite(side1, side2, side3)
    angle2 = _opposite(side2, side3, side1)
    return TriangleSolution(
        angle1=angle1,
        angle2=angle2,
        angle3=180.0 - angle1 - angle2,
        side1=float(side1),
        side2=float(side2),
        side3=float(side3),
    )


def is_pythagorean_triple(side1: int, side2: int, side3: int) -> bool:
    """Return whether three integers satisfy ``side1**2 + side2**2 == side3**2``."""
    sides = (side1, side2, side3)
    if not all(isinstance(s, int) and not isinstance(s, bool) for s in sides):
        return False
    return side1 * side1 + side2 * side2 == side3 * side3
