"""Exception types raised by tallykit for invalid caller input.

Statistical functions never raise for empty input; they return ``math.nan``
or ``None`` instead. The types below are reserved for violated preconditions.
"""

from __future__ import annotations


class ArgumentError(ValueError):
    """An argument does not satisfy the constraints of the called function."""


class RangeViolationError(ArgumentError):
    """A numeric interval is inverted or excludes every admissible value."""


class DivideByZeroError(ArgumentError):
    """The given input would knowingly cause a division by zero."""
