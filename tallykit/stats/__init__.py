"""
Frequency distributions and descriptive statistics.

Modules:
    frequency:
        Absolute, cumulative and relative frequency tables over any sequence
        of hashable values.

    descriptive:
        Mean, median, mode, deviations, variance and standard deviation with
        ``nan``/``None`` results for empty samples.

    distributions:
        Normal and uniform probability density functions.

Design Principle:
    This subpackage has no dependencies on reporting or plotting. Every
    function is pure and operates on caller-supplied data.
"""

from .descriptive import (
    arithmetic_mean,
    get_product,
    get_sum,
    mean_absolute_deviation,
    mean_signed_deviation,
    median,
    median_absolute_deviation,
    mode,
    standard_deviation,
    summarize,
    variance,
)
from .distributions import normal_pdf, uniform_pdf
from .frequency import absolute_frequency, cumulative_frequency, relative_frequency

__all__ = [
    "absolute_frequency",
    "cumulative_frequency",
    "relative_frequency",
    "get_sum",
    "get_product",
    "arithmetic_mean",
    "median",
    "mode",
    "mean_signed_deviation",
    "mean_absolute_deviation",
    "median_absolute_deviation",
    "variance",
    "standard_deviation",
    "summarize",
    "normal_pdf",
    "uniform_pdf",
]
