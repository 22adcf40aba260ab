"""
Interpolation — Linear interpolation and its inverse

ФОРМУЛЫ:
    lerp(a, b, t)         = a + (b - a) * t
    inverse_lerp(a, b, r) = (r - a) / (b - a)

Значения t вне [0, 1] не ограничиваются: lerp экстраполирует за концы
отрезка. Например, lerp(2, 3, -0.5) == 1.5, lerp(2, 3, 1.5) == 3.5.

Вырожденный отрезок (a ≈ b) для inverse_lerp:
- r ≈ a → 0.5 (отрезок стянут в точку, содержащую r)
- иначе решения нет:
  - float / numpy floating → NaN того же типа
  - Decimal → ArgumentOutOfRangeError (fixed-precision тип сигнализирует
    ошибкой, а не сентинелом)
"""

import math
from decimal import Decimal
from typing import Any

import numpy as np

from src.foundry.contracts.arguments import ArgumentOutOfRangeError
from src.foundry.math.numerical_safeguards import is_nearly_equal, is_nearly_zero


def lerp(first: Any, second: Any, amount: Any) -> Any:
    """
    Линейная интерполяция между first и second.

    Args:
        first: Первое значение (t = 0)
        second: Второе значение (t = 1)
        amount: Вес второго значения (без ограничения диапазона)

    Returns:
        first + (second - first) * amount

    Examples:
        >>> lerp(2.0, 4.0, 0.5)
        3.0
        >>> lerp(2.0, 3.0, -0.5)
        1.5
        >>> lerp(Decimal("1"), Decimal("2"), Decimal("0.25"))
        Decimal('1.25')
    """
    return first + (second - first) * amount


def inverse_lerp(first: Any, second: Any, result: Any) -> Any:
    """
    Вес, при котором lerp(first, second, вес) == result.

    Args:
        first: Первое значение
        second: Второе значение
        result: Желаемый результат интерполяции

    Returns:
        Вес t; 0.5 для вырожденного отрезка, содержащего result;
        NaN для вырожденного отрезка без result (float типы)

    Raises:
        ArgumentOutOfRangeError: Decimal, вырожденный отрезок без result

    Examples:
        >>> inverse_lerp(2.0, 4.0, 3.0)
        0.5
        >>> inverse_lerp(5.0, 5.0, 5.0)
        0.5
        >>> math.isnan(inverse_lerp(5.0, 5.0, 6.0))
        True
    """
    difference = second - first

    if isinstance(difference, Decimal):
        if difference == 0:
            if result == first:
                return Decimal("0.5")
            raise ArgumentOutOfRangeError(
                "result",
                f"result {result} cannot be produced by interpolating "
                f"between equal values {first} and {second}",
            )
        return (result - first) / difference

    if is_nearly_zero(difference):
        if is_nearly_equal(result, first):
            return _typed_like(difference, 0.5)
        return _typed_like(difference, math.nan)

    return (result - first) / difference


def _typed_like(sample: Any, value: float) -> Any:
    # float32 на входе → float32 на выходе
    if isinstance(sample, np.floating):
        return type(sample)(value)
    return value
