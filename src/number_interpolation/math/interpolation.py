"""
Interpolation — Линейная интерполяция внутри отрезка

Stateless-движок для NumericRange. Функции принимают границы явно и
поэтому сами валидируют их: вызывающий код может обратиться к ним
напрямую с произвольными minimum/maximum.

ФОРМУЛЫ:
    value      = minimum * (1 - percentage) + maximum * percentage
    percentage = (value - minimum) / (maximum - minimum)
    clamped    = min(maximum, max(minimum, value))

ПОРЯДОК ПРОВЕРОК (первая неудачная определяет ошибку):
    get_value_by_percentage: percentage ∈ [0, 1], затем minimum < maximum
    get_percentage_by_value: value ∈ [minimum, maximum], затем minimum < maximum
    clamp:                   только minimum < maximum

Арифметика выполняется операторами самого типа, без расширения и
округления: Decimal даёт точный десятичный результат, float подвержен
обычному округлению.
"""

from number_interpolation.math.errors import (
    InvalidRangeError,
    PercentageOutOfRangeError,
    ValueOutOfRangeError,
)
from number_interpolation.math.predicates import (
    N,
    is_valid_percentage,
    is_within_range,
    one_of,
)


def validate_bounds(minimum: N, maximum: N) -> None:
    """
    Валидация границ диапазона.

    Raises:
        InvalidRangeError: Если minimum не строго меньше maximum
    """
    if not minimum < maximum:
        raise InvalidRangeError(minimum, maximum)


def get_value_by_percentage(minimum: N, maximum: N, percentage: N) -> N:
    """
    Значение, соответствующее доле внутри диапазона (lerp).

    Args:
        minimum: Нижняя граница
        maximum: Верхняя граница
        percentage: Доля в [0, 1]

    Returns:
        minimum * (1 - percentage) + maximum * percentage
        (ровно minimum при 0 и ровно maximum при 1)

    Raises:
        PercentageOutOfRangeError: Если percentage вне [0, 1]
        InvalidRangeError: Если minimum >= maximum

    Examples:
        >>> get_value_by_percentage(Decimal(425), Decimal(935), Decimal("0.38"))
        Decimal('618.80')
    """
    if not is_valid_percentage(percentage):
        raise PercentageOutOfRangeError(percentage)

    validate_bounds(minimum, maximum)

    return minimum * (one_of(percentage) - percentage) + maximum * percentage


def get_percentage_by_value(minimum: N, maximum: N, value: N) -> N:
    """
    Доля, соответствующая значению внутри диапазона.

    Обратное к get_value_by_percentage с точностью до типа.

    Args:
        minimum: Нижняя граница
        maximum: Верхняя граница
        value: Значение в [minimum, maximum]

    Returns:
        (value - minimum) / (maximum - minimum)

    Raises:
        ValueOutOfRangeError: Если value вне [minimum, maximum]
        InvalidRangeError: Если minimum >= maximum

    Examples:
        >>> get_percentage_by_value(0, 200, 50)
        0.25
    """
    if not is_within_range(value, minimum, maximum):
        raise ValueOutOfRangeError(value, minimum, maximum)

    validate_bounds(minimum, maximum)

    return (value - minimum) / (maximum - minimum)


def clamp(value: N, minimum: N, maximum: N) -> N:
    """
    Ограничение значения отрезком [minimum, maximum].

    Значение не валидируется: любое число молча приводится к границе.

    Raises:
        InvalidRangeError: Если minimum >= maximum

    Examples:
        >>> clamp(50, 10, 45)
        45
        >>> clamp(5, 10, 45)
        10
    """
    validate_bounds(minimum, maximum)

    return min(maximum, max(minimum, value))
