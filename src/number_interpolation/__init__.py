"""
number_interpolation — generic numeric ranges.

Percentage ↔ value conversion, clamping and cross-range interpolation
over any ordered numeric type (int, float, Decimal, numpy.float32, ...).
"""

from number_interpolation.domain import (
    DecimalRange,
    DoubleRange,
    Float32,
    FloatRange,
    NumericRange,
)
from number_interpolation.math import (
    InvalidRangeError,
    NumericRangeError,
    PercentageOutOfRangeError,
    SupportsRangeArithmetic,
    ValueOutOfRangeError,
    clamp,
    get_percentage_by_value,
    get_value_by_percentage,
    is_valid_percentage,
    is_within_range,
    validate_bounds,
)

__all__ = [
    # Domain
    "NumericRange",
    "DecimalRange",
    "DoubleRange",
    "FloatRange",
    "Float32",
    # Errors
    "NumericRangeError",
    "InvalidRangeError",
    "PercentageOutOfRangeError",
    "ValueOutOfRangeError",
    # Engine
    "SupportsRangeArithmetic",
    "clamp",
    "get_percentage_by_value",
    "get_value_by_percentage",
    "is_valid_percentage",
    "is_within_range",
    "validate_bounds",
]
