import math

import pytest

from tallykit.exceptions import ArgumentError, DivideByZeroError, RangeViolationError
from tallykit.stats.distributions import normal_pdf, uniform_pdf


def test_standard_normal_peak():
    assert math.isclose(normal_pdf(0.0), 1.0 / math.sqrt(2.0 * math.pi))


def test_normal_pdf_is_symmetric_and_decays():
    assert math.isclose(normal_pdf(1.3, 0.5, 2.0), normal_pdf(-0.3, 0.5, 2.0))
    assert normal_pdf(5.0) < normal_pdf(1.0) < normal_pdf(0.0)


def test_normal_pdf_rejects_non_positive_scale():
    with pytest.raises(ArgumentError):
        normal_pdf(0.0, 0.0, 0.0)
    with pytest.raises(ArgumentError):
        normal_pdf(0.0, 0.0, -1.0)


def test_normal_pdf_matches_scipy():
    stats = pytest.importorskip("scipy.stats")
    for x, loc, scale in [(0.0, 0.0, 1.0), (2.5, 1.0, 0.5), (-3.0, 2.0, 4.0)]:
        assert math.isclose(
            normal_pdf(x, loc, scale), float(stats.norm.pdf(x, loc, scale)), rel_tol=1e-12
        )


class TestUniformPdf:
    def test_unit_interval(self):
        assert uniform_pdf(0.0, 0, 1) == 1
        assert uniform_pdf(0.5, 0, 1) == 1
        assert uniform_pdf(1.0, 0, 1) == 1

    def test_general_interval(self):
        assert math.isclose(uniform_pdf(3.0, 2.0, 6.0), 0.25)

    def test_outside_interval(self):
        assert uniform_pdf(-0.1, 0, 1) == 0
        assert uniform_pdf(7.0, 2.0, 6.0) == 0

    def test_inverted_interval_raises(self):
        with pytest.raises(RangeViolationError):
            uniform_pdf(0.5, 1, 0)

    def test_degenerate_interval_raises(self):
        with pytest.raises(DivideByZeroError):
            uniform_pdf(1.0, 1.0, 1.0)
