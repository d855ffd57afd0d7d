"""
Trigonometric identities and triangle solving.

Modules:
    reciprocal:
        csc, sec and cot with exact values at common angles.

    inverse:
        arccot, arccsc and arcsec.

    hyperbolic:
        Inverse hyperbolic (area) functions; out-of-domain input is ``nan``.

    triangles:
        Laws of sines and cosines and AAS/ASA/SSS solvers.
"""

from .hyperbolic import arcosh, arcoth, arcsch, arsech, arsinh, artanh
from .inverse import arccot, arccsc, arcsec
from .reciprocal import cot, csc, sec
from .triangles import (
    TriangleSolution,
    is_pythagorean_triple,
    law_of_cosines,
    law_of_sines,
    solve_aas,
    solve_asa,
    solve_sss,
)

__all__ = [
    "csc",
    "sec",
    "cot",
    "arccot",
    "arccsc",
    "arcsec",
    "arsinh",
    "arcosh",
    "artanh",
    "arcsch",
    "arsech",
    "arcoth",
    "TriangleSolution",
    "law_of_cosines",
    "law_of_sines",
    "solve_aas",
    "solve_asa",
    "solve_sss",
    "is_pythagorean_triple",
]
