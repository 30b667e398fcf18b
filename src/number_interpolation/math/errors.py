"""
Range Errors — Таксономия ошибок числовых диапазонов

Все ошибки синхронные и фатальные для вызова: библиотека ничего не
восстанавливает сама, решение принимает вызывающий код.

Иерархия:
    NumericRangeError
    ├── InvalidRangeError          (minimum >= maximum)
    ├── PercentageOutOfRangeError  (percentage вне [0, 1])
    └── ValueOutOfRangeError       (value вне [minimum, maximum])

Исключения наследуются от Exception, а не от ValueError: pydantic
оборачивает ValueError из валидаторов в ValidationError, а наружу
должна выходить именно доменная ошибка.
"""

from typing import Any


class NumericRangeError(Exception):
    """Базовая ошибка числового диапазона."""

    pass


class InvalidRangeError(NumericRangeError):
    """
    Нижняя граница не строго меньше верхней.

    Вырожденный диапазон (minimum == maximum) тоже невалиден:
    обратное преобразование value → percentage делило бы на ноль.
    """

    def __init__(self, minimum: Any, maximum: Any):
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"Minimum value {minimum} should be less than maximum value {maximum}"
        )


class PercentageOutOfRangeError(NumericRangeError):
    """Доля вне отрезка [0, 1]."""

    def __init__(self, percentage: Any):
        self.percentage = percentage
        super().__init__(f"percentage should be between 0 and 1, got {percentage}")


class ValueOutOfRangeError(NumericRangeError):
    """
    Значение вне [minimum, maximum].

    Не используется в clamp: там значение молча ограничивается.
    """

    def __init__(self, value: Any, minimum: Any, maximum: Any):
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"value {value} should be within the range of the minimum {minimum} "
            f"and maximum {maximum} values"
        )
