"""
NumericRange — Неизменяемый числовой диапазон [minimum, maximum]

Immutable Pydantic модель (frozen=True), обобщённая по числовому типу T.
Методы экземпляра — тонкие делегаты к stateless-функциям из
number_interpolation.math.interpolation, которые и реализуют математику.

Готовые параметризации:
    DecimalRange — NumericRange[Decimal] (фиксированная точка, точная арифметика)
    DoubleRange  — NumericRange[float]   (двойная точность)
    FloatRange   — NumericRange[Float32] (одинарная точность, numpy.float32)

Параметризованные модели приводят границы к своему типу до проверки
инварианта minimum < maximum: две границы, совпавшие после приведения
к float32, отклоняются.
"""

from decimal import Decimal
from functools import lru_cache
from typing import Annotated, Any, Generic, TypeVar

import numpy
from pydantic import BaseModel, BeforeValidator, ConfigDict, TypeAdapter, model_validator

from number_interpolation.math.interpolation import (
    clamp,
    get_percentage_by_value,
    get_value_by_percentage,
    validate_bounds,
)
from number_interpolation.math.predicates import SupportsRangeArithmetic, is_within_range


# =============================================================================
# ТИПЫ
# =============================================================================

# Непараметризованный NumericRange проверяет границы через isinstance
T = TypeVar("T", bound=SupportsRangeArithmetic)

# Одинарная точность: вход любого числового вида приводится к numpy.float32
Float32 = Annotated[numpy.float32, BeforeValidator(numpy.float32)]


# Позиционные аргументы конструктора
_BOUND_FIELDS = ("minimum", "maximum")


@lru_cache(maxsize=None)
def _number_adapter(number_type: Any) -> TypeAdapter:
    """TypeAdapter для приведения аргументов к числовому типу параметризации."""
    return TypeAdapter(number_type, config=ConfigDict(arbitrary_types_allowed=True))


# =============================================================================
# NUMERIC RANGE MODEL
# =============================================================================


class NumericRange(BaseModel, Generic[T]):
    """
    Замкнутый числовой диапазон.

    Инвариант: minimum < maximum (строго), проверяется при создании,
    в том числе через model_validate. После создания модель не меняется.

    Аргументы методов параметризованных диапазонов приводятся к их типу
    теми же правилами pydantic, что и границы: DecimalRange принимает
    0.5, DoubleRange принимает Decimal(50). Неприводимый аргумент даёт
    pydantic.ValidationError. Непараметризованный NumericRange
    аргументы не трогает.

    Examples:
        >>> NumericRange(0, 100).get_value_by_percentage(0.5)
        50.0
        >>> NumericRange(0, 800).interpolate(NumericRange(0, 500), 40)
        25.0
        >>> DecimalRange(10, 45).clamp(50)
        Decimal('45')
    """

    minimum: T
    maximum: T

    model_config = {"frozen": True, "extra": "forbid", "arbitrary_types_allowed": True}

    def __init__(self, *args: Any, **data: Any) -> None:
        """
        Границы передаются позиционно (minimum, maximum) или по именам.

        Raises:
            InvalidRangeError: Если minimum >= maximum
            ValidationError: Если граница отсутствует, лишняя или неприводима к T
            TypeError: Если позиционных аргументов больше двух
        """
        if len(args) > len(_BOUND_FIELDS):
            raise TypeError(
                f"{type(self).__name__} takes at most {len(_BOUND_FIELDS)} "
                f"positional arguments ({len(args)} given)"
            )

        super().__init__(**dict(zip(_BOUND_FIELDS, args)), **data)

    @model_validator(mode="after")
    def validate_order(self) -> "NumericRange[T]":
        """Проверка minimum < maximum после приведения типов."""
        validate_bounds(self.minimum, self.maximum)
        return self

    @classmethod
    def _coerce(cls, number: Any) -> Any:
        """Приведение аргумента к числовому типу параметризации."""
        args = cls.__pydantic_generic_metadata__["args"]
        if not args:
            return number

        return _number_adapter(args[0]).validate_python(number)

    def get_value_by_percentage(self, percentage: T) -> T:
        """
        Значение, соответствующее доле внутри диапазона.

        Raises:
            PercentageOutOfRangeError: Если percentage вне [0, 1]
        """
        return get_value_by_percentage(self.minimum, self.maximum, self._coerce(percentage))

    def get_percentage_by_value(self, value: T) -> T:
        """
        Доля, соответствующая значению внутри диапазона.

        Raises:
            ValueOutOfRangeError: Если value вне [minimum, maximum]
        """
        return get_percentage_by_value(self.minimum, self.maximum, self._coerce(value))

    def clamp(self, value: T) -> T:
        """Ограничение значения диапазоном (без ошибки для значений снаружи)."""
        return clamp(self._coerce(value), self.minimum, self.maximum)

    def contains(self, value: T) -> bool:
        """True если minimum <= value <= maximum."""
        return is_within_range(self._coerce(value), self.minimum, self.maximum)

    def interpolate(self, other: "NumericRange[T]", value: T) -> T:
        """
        Перенос значения из этого диапазона в другой с сохранением доли.

        Эквивалентно other.get_value_by_percentage(self.get_percentage_by_value(value)).
        Доля приводится к типу other, поэтому диапазоны разных типов совместимы.

        Args:
            other: Целевой диапазон
            value: Значение в единицах этого диапазона

        Returns:
            Значение в единицах other

        Raises:
            ValueOutOfRangeError: Если value вне этого диапазона
            InvalidRangeError: Если границы любого из диапазонов невалидны
        """
        percentage = get_percentage_by_value(self.minimum, self.maximum, self._coerce(value))

        return get_value_by_percentage(other.minimum, other.maximum, other._coerce(percentage))


# =============================================================================
# ПАРАМЕТРИЗАЦИИ
# =============================================================================

DecimalRange = NumericRange[Decimal]
DoubleRange = NumericRange[float]
FloatRange = NumericRange[Float32]
