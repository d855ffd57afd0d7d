"""
Stateless helpers for frequency analysis, descriptive statistics and random
test-data generation.

Modules:
    - stats: Frequency tables, mean/median/mode/deviation statistics and
      probability densities.
    - generators: Random booleans, integers, floats, strings and fixed-width
      numeric arrays from an injectable uniform source.
    - bounds, sequences, strings: Interval checks, clamping, chunking and
      small string transforms.
    - trig: Reciprocal, inverse and hyperbolic identities and triangle solving.
    - reporting, plotting: pandas tables, CSV export and matplotlib figures.
"""

__version__ = "1.0.0"

from .bounds import clamp, is_between_inclusive
from .exceptions import ArgumentError, DivideByZeroError, RangeViolationError
from .generators import (
    random_boolean,
    random_float,
    random_integer,
    random_item,
    random_string,
    reseed,
)
from .sequences import chunk
from .stats import (
    absolute_frequency,
    arithmetic_mean,
    cumulative_frequency,
    median,
    mode,
    relative_frequency,
    standard_deviation,
    summarize,
)

__all__ = [
    # Errors
    "ArgumentError",
    "RangeViolationError",
    "DivideByZeroError",
    # Frequency analysis
    "absolute_frequency",
    "cumulative_frequency",
    "relative_frequency",
    "arithmetic_mean",
    "median",
    "mode",
    "standard_deviation",
    "summarize",
    # Random generation
    "random_boolean",
    "random_integer",
    "random_float",
    "random_item",
    "random_string",
    "reseed",
    # Helpers
    "chunk",
    "clamp",
    "is_between_inclusive",
]
