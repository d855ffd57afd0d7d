"""Test trigonometric identities and triangle solving."""

import math

import pytest

from tallykit.exceptions import ArgumentError, DivideByZeroError, RangeViolationError
from tallykit.trig import (
    arccot,
    arccsc,
    arcosh,
    arcoth,
    arcsch,
    arcsec,
    arsech,
    arsinh,
    artanh,
    cot,
    csc,
    is_pythagorean_triple,
    law_of_cosines,
    law_of_sines,
    sec,
    solve_aas,
    solve_asa,
    solve_sss,
)


class TestReciprocal:
    def test_csc(self):
        assert csc(0) == math.inf
        assert csc(math.pi / 4) == math.sqrt(2.0)
        assert csc(math.pi / 2) == 1.0
        assert math.isclose(csc(math.pi / 6), 2.0)
        assert math.isnan(csc(math.pi))

    def test_sec(self):
        assert sec(0) == 1.0
        assert sec(math.pi / 4) == math.sqrt(2.0)
        assert math.isclose(sec(math.pi / 3), 2.0)
        assert math.isnan(sec(math.pi / 2))

    def test_cot(self):
        assert cot(0) == math.inf
        assert cot(math.pi / 4) == 1.0
        assert cot(math.pi / 2) == 0.0
        assert math.isnan(cot(math.pi))
        assert math.isnan(cot(math.inf))
        assert math.isnan(cot(math.nan))

    def test_tiny_arguments_are_not_treated_as_pi_multiples(self):
        assert math.isclose(csc(1e-13), 1e13)
        assert math.isclose(cot(1e-13), 1e13)
        assert math.isfinite(csc(-1e-300))
        assert math.isfinite(cot(-1e-300))
        assert cot(-1e-300) < 0


class TestInverse:
    def test_arccot(self):
        assert math.isclose(arccot(1.0), math.pi / 4)
        assert arccot(0) == math.pi / 2

    def test_arccsc_and_arcsec(self):
        assert math.isclose(arccsc(2.0), math.pi / 6)
        assert math.isclose(arcsec(2.0), math.pi / 3)
        assert math.isnan(arccsc(0.5))
        assert math.isnan(arcsec(-0.5))


class TestHyperbolic:
    def test_round_trips(self):
        assert math.isclose(arsinh(math.sinh(1.5)), 1.5)
        assert math.isclose(arcosh(math.cosh(2.0)), 2.0)
        assert math.isclose(artanh(math.tanh(0.3)), 0.3)
        assert math.isclose(arcsch(1.0 / math.sinh(0.7)), 0.7)
        assert math.isclose(arsech(1.0 / math.cosh(0.9)), 0.9)
        assert math.isclose(arcoth(1.0 / math.tanh(1.1)), 1.1)

    @pytest.mark.parametrize(
        "fn, x",
        [(arcosh, 0.5), (artanh, 1.0), (arcsch, 0.0), (arsech, 0.0), (arsech, 1.5), (arcoth, 1.0), (arcoth, 0.5)],
    )
    def test_out_of_domain_is_nan(self, fn, x):
        assert math.isnan(fn(x))


class TestLaws:
    def test_law_of_cosines_right_angle(self):
        assert math.isclose(law_of_cosines(3.0, 4.0, math.pi / 2), 5.0)

    def test_law_of_sines(self):
        assert math.isclose(law_of_sines(math.pi / 2, math.pi / 6, 1.0), 2.0)

    def test_law_of_sines_zero_divisor(self):
        with pytest.raises(DivideByZeroError):
            law_of_sines(1.0, 0.0, 1.0)


class TestSolve:
    def test_solve_aas(self):
        tri = solve_aas(30.0, 60.0, 1.0)
        assert math.isclose(tri.angle3, 90.0)
        assert math.isclose(tri.side2, math.sqrt(3.0))
        assert math.isclose(tri.side3, 2.0)

    def test_solve_asa(self):
        tri = solve_asa(30.0, 2.0, 60.0)
        assert math.isclose(tri.side1, 1.0)
        assert math.isclose(tri.side2, math.sqrt(3.0))
        assert math.isclose(tri.perimeter, 3.0 + math.sqrt(3.0))

    def test_solve_sss(self):
        tri = solve_sss(3.0, 4.0, 5.0)
        assert math.isclose(tri.angle3, 90.0)
        assert math.isclose(tri.angle1 + tri.angle2 + tri.angle3, 180.0)
        assert math.isclose(tri.angle1, math.degrees(math.asin(0.6)))

    def test_impossible_angles_raise(self):
        with pytest.raises(RangeViolationError):
            solve_aas(100.0, 90.0, 1.0)
        with pytest.raises(RangeViolationError):
            solve_asa(-10.0, 1.0, 30.0)

    def test_triangle_inequality(self):
        with pytest.raises(ArgumentError):
            solve_sss(1.0, 2.0, 3.0)
        with pytest.raises(ArgumentError):
            solve_sss(0.0, 2.0, 2.0)


def test_is_pythagorean_triple():
    assert is_pythagorean_triple(3, 4, 5)
    assert not is_pythagorean_triple(2, 3, 4)
    assert not is_pythagorean_triple(3.0, 4, 5)
