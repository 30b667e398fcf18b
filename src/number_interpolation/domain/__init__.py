"""
Domain models.

Contains the immutable NumericRange value object and its ready-made
parametrisations.
"""

from number_interpolation.domain.numeric_range import (
    DecimalRange,
    DoubleRange,
    Float32,
    FloatRange,
    NumericRange,
)

__all__ = [
    "NumericRange",
    "DecimalRange",
    "DoubleRange",
    "FloatRange",
    "Float32",
]
