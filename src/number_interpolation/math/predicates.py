"""
Predicates — Проверки доли и принадлежности диапазону

Чистые предикаты без побочных эффектов. Используются движком
интерполяции, но пригодны и сами по себе.

Ноль и единица берутся из самого числового типа (type(x)(0), type(x)(1)),
поэтому Decimal сравнивается с Decimal, numpy.float32 с numpy.float32.
"""

from typing import Any, Protocol, TypeVar, runtime_checkable


# =============================================================================
# ТИПЫ
# =============================================================================


@runtime_checkable
class SupportsRangeArithmetic(Protocol):
    """
    Набор возможностей числового типа, достаточный для диапазона.

    Упорядоченность, сложение, вычитание, умножение, деление и
    конструирование из int (для нуля и единицы). Подходят int, float,
    Decimal, Fraction, numpy.float32 и numpy.float64.
    """

    def __lt__(self, other: Any, /) -> bool: ...

    def __le__(self, other: Any, /) -> bool: ...

    def __add__(self, other: Any, /) -> Any: ...

    def __sub__(self, other: Any, /) -> Any: ...

    def __mul__(self, other: Any, /) -> Any: ...

    def __truediv__(self, other: Any, /) -> Any: ...


N = TypeVar("N", bound=SupportsRangeArithmetic)


# =============================================================================
# НЕЙТРАЛЬНЫЕ ЭЛЕМЕНТЫ
# =============================================================================


def zero_of(number: N) -> N:
    """Аддитивная единица (ноль) типа number."""
    return type(number)(0)


def one_of(number: N) -> N:
    """Мультипликативная единица типа number."""
    return type(number)(1)


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


def is_valid_percentage(percentage: N) -> bool:
    """
    Проверка, что доля лежит в [0, 1].

    Args:
        percentage: Доля (в единицах того же типа, что и границы)

    Returns:
        True если 0 <= percentage <= 1 (NaN всегда False)

    Examples:
        >>> is_valid_percentage(0.5)
        True
        >>> is_valid_percentage(Decimal("3.3"))
        False
    """
    return bool(zero_of(percentage) <= percentage <= one_of(percentage))


def is_within_range(value: N, minimum: N, maximum: N) -> bool:
    """
    Проверка принадлежности отрезку [minimum, maximum] (обе границы включены).

    Корректность самих границ не проверяется: при minimum > maximum
    результат всегда False.
    """
    return bool(minimum <= value <= maximum)
