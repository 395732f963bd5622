"""
Error taxonomy for series-system construction, evaluation and sampling.

Every error derives from SeriesHazError and from the builtin exception a
caller would naturally catch (TypeError, ValueError, IndexError).
"""

from __future__ import annotations


class SeriesHazError(Exception):
    """Base class for all errors raised by this package."""


class TypeMismatchError(SeriesHazError, TypeError):
    """A component is not a HazardDistribution, or the component list is empty."""


class MissingParameterCountError(SeriesHazError, ValueError):
    """The parameter layout cannot be inferred from the components."""


class LayoutArityError(SeriesHazError, ValueError):
    """An explicit n_par does not have one entry per component."""


class ParameterLengthError(SeriesHazError, ValueError):
    """A flat parameter vector does not match the layout length."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} parameters but got {actual}")


class ComponentIndexError(SeriesHazError, IndexError):
    """A component index outside [1, m]."""

    def __init__(self, j: int, m: int):
        self.j = j
        self.m = m
        super().__init__(f"Component index j={j} out of range [1, {m}]")


class MissingParametersError(SeriesHazError, ValueError):
    """No parameter vector was passed and none is stored."""


class InvalidRecordTableError(SeriesHazError, ValueError):
    """A (t, delta) record table failed validation."""
