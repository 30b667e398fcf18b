"""
Math-примитивы числового диапазона

Stateless-движок интерполяции, предикаты и таксономия ошибок.
"""

# Errors
from number_interpolation.math.errors import (
    InvalidRangeError,
    NumericRangeError,
    PercentageOutOfRangeError,
    ValueOutOfRangeError,
)

# Predicates
from number_interpolation.math.predicates import (
    SupportsRangeArithmetic,
    is_valid_percentage,
    is_within_range,
    one_of,
    zero_of,
)

# Interpolation engine
from number_interpolation.math.interpolation import (
    clamp,
    get_percentage_by_value,
    get_value_by_percentage,
    validate_bounds,
)

__all__ = [
    # Errors
    "NumericRangeError",
    "InvalidRangeError",
    "PercentageOutOfRangeError",
    "ValueOutOfRangeError",
    # Predicates — Types
    "SupportsRangeArithmetic",
    # Predicates — Functions
    "is_valid_percentage",
    "is_within_range",
    "one_of",
    "zero_of",
    # Interpolation engine
    "clamp",
    "get_percentage_by_value",
    "get_value_by_percentage",
    "validate_bounds",
]
