"""Numeric constants shared by the range, random and trigonometry helpers."""

from __future__ import annotations

import math

PHI: float = 1.618033988749895
TAU: float = 2.0 * math.pi
PI_OVER_TWO: float = math.pi / 2.0
PI_OVER_FOUR: float = math.pi / 4.0

# Degrees in one radian, and radians in one degree.
DEG_PER_RAD: float = 57.29577951308232
RAD_PER_DEG: float = 0.017453292519943295

I8_MIN: int = -128
I8_MAX: int = 127
I16_MIN: int = -32_768
I16_MAX: int = 32_767
I32_MIN: int = -2_147_483_648
I32_MAX: int = 2_147_483_647

U8_MIN: int = 0
U8_MAX: int = 255
U16_MIN: int = 0
U16_MAX: int = 65_535
U32_MIN: int = 0
U32_MAX: int = 4_294_967_295

# IEEE 754 binary32, rounded to two significant figures.
F32_MIN: float = -3.4e38
F32_MAX: float = 3.4e38
