"""
Тесты для предикатов числового диапазона

Проверяет:
1. is_valid_percentage: отрезок [0, 1] включительно, для разных типов
2. is_within_range: обе границы включены
3. zero_of / one_of: нейтральные элементы того же типа
4. SupportsRangeArithmetic: структурная проверка типа
"""

from decimal import Decimal
from fractions import Fraction

import numpy

from number_interpolation.math.predicates import (
    SupportsRangeArithmetic,
    is_valid_percentage,
    is_within_range,
    one_of,
    zero_of,
)


class TestIsValidPercentage:
    """Тесты для is_valid_percentage"""

    def test_bounds_are_inclusive(self) -> None:
        """0 и 1 — валидные доли"""
        assert is_valid_percentage(0.0) is True
        assert is_valid_percentage(1.0) is True
        assert is_valid_percentage(Decimal("0")) is True
        assert is_valid_percentage(Decimal("1")) is True

    def test_inner_values(self) -> None:
        """Значения внутри (0, 1) валидны для всех типов"""
        assert is_valid_percentage(0.5) is True
        assert is_valid_percentage(Decimal("0.38")) is True
        assert is_valid_percentage(Fraction(1, 3)) is True
        assert is_valid_percentage(numpy.float32(0.25)) is True

    def test_outside_values_rejected(self) -> None:
        """Значения вне [0, 1] отклоняются"""
        assert is_valid_percentage(3.3) is False
        assert is_valid_percentage(-0.1) is False
        assert is_valid_percentage(Decimal("1.0001")) is False
        assert is_valid_percentage(Decimal("-0.0001")) is False

    def test_nan_rejected(self) -> None:
        """NaN не является долей"""
        assert is_valid_percentage(float("nan")) is False

    def test_integer_percentages(self) -> None:
        """Для int валидны только 0 и 1"""
        assert is_valid_percentage(0) is True
        assert is_valid_percentage(1) is True
        assert is_valid_percentage(2) is False


class TestIsWithinRange:
    """Тесты для is_within_range"""

    def test_bounds_are_inclusive(self) -> None:
        """Обе границы принадлежат отрезку"""
        assert is_within_range(0, 0, 10) is True
        assert is_within_range(10, 0, 10) is True

    def test_inside_and_outside(self) -> None:
        """Внутри — True, снаружи — False"""
        assert is_within_range(5, 0, 10) is True
        assert is_within_range(-1, 0, 10) is False
        assert is_within_range(11, 0, 10) is False
        assert is_within_range(Decimal("250"), Decimal("0"), Decimal("200")) is False

    def test_numpy_scalars_give_plain_bool(self) -> None:
        """numpy.float32 даёт bool, а не numpy.bool_"""
        low, high = numpy.float32(0), numpy.float32(10)
        assert is_within_range(numpy.float32(5), low, high) is True
        assert is_within_range(numpy.float32(11), low, high) is False
        assert is_valid_percentage(numpy.float32(2.0)) is False

    def test_inverted_bounds_never_contain(self) -> None:
        """При minimum > maximum отрезок пуст"""
        assert is_within_range(5, 10, 0) is False
        assert is_within_range(10, 10, 0) is False


class TestIdentities:
    """Тесты для zero_of / one_of"""

    def test_type_preserved(self) -> None:
        """Ноль и единица имеют тип аргумента"""
        assert isinstance(zero_of(Decimal("3.5")), Decimal)
        assert isinstance(one_of(Decimal("3.5")), Decimal)
        assert isinstance(zero_of(numpy.float32(2.0)), numpy.float32)
        assert isinstance(one_of(numpy.float32(2.0)), numpy.float32)
        assert isinstance(one_of(Fraction(1, 2)), Fraction)

    def test_values(self) -> None:
        """Значения нейтральных элементов"""
        assert zero_of(7.5) == 0.0
        assert one_of(7.5) == 1.0
        assert zero_of(Decimal("9")) == Decimal("0")
        assert one_of(Decimal("9")) == Decimal("1")


class TestSupportsRangeArithmetic:
    """Структурная проверка числового типа"""

    def test_numeric_types_supported(self) -> None:
        """Числовые типы удовлетворяют протоколу"""
        assert isinstance(1, SupportsRangeArithmetic)
        assert isinstance(1.5, SupportsRangeArithmetic)
        assert isinstance(Decimal("1.5"), SupportsRangeArithmetic)
        assert isinstance(Fraction(1, 2), SupportsRangeArithmetic)
        assert isinstance(numpy.float32(1.5), SupportsRangeArithmetic)

    def test_non_numeric_types_rejected(self) -> None:
        """Строка упорядочена, но не поддерживает вычитание"""
        assert not isinstance("abc", SupportsRangeArithmetic)
        assert not isinstance(None, SupportsRangeArithmetic)
