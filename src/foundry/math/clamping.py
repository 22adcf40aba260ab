"""
Clamping — Saturating clamp and rounding

Модуль ограничивает значения диапазоном без переполнения:
- clamp: ограничение [min, max] с перестановкой границ при min > max
- round_saturating: округление float до целого фиксированной ширины

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. clamp(v, a, b) == clamp(v, b, a)
2. Границы другого (более широкого) типа приводятся к типу значения
   с насыщением до его диапазона, а не с переполнением или исключением
3. Округление: половина — от нуля (2.5 → 3, -2.5 → -3)
"""

import logging
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

import numpy as np

from src.foundry.contracts.arguments import ArgumentOutOfRangeError
from src.foundry.domain.numeric_types import INT32, INT64, UINT32, UINT64, IntegerType

logger = logging.getLogger(__name__)


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_away_from_zero(value: Any) -> int:
    """
    Округление до ближайшего целого, половина — от нуля.

    Использует точное десятичное представление float, поэтому значения
    вроде 0.49999999999999994 не округляются вверх.

    Raises:
        ArgumentOutOfRangeError: Если value — NaN или Inf

    Examples:
        >>> round_half_away_from_zero(2.5)
        3
        >>> round_half_away_from_zero(-2.5)
        -3
        >>> round_half_away_from_zero(2.4)
        2
    """
    if not math.isfinite(value):
        raise ArgumentOutOfRangeError(
            "value", f"value must be a finite number, got {value}"
        )
    exact = value if isinstance(value, Decimal) else Decimal(float(value))
    return int(exact.to_integral_value(rounding=ROUND_HALF_UP))


def round_saturating(value: float, integer_type: IntegerType) -> int:
    """
    Округление float до целого типа фиксированной ширины с насыщением.

    Args:
        value: Исходное значение
        integer_type: Целевой целочисленный тип

    Returns:
        Ближайшее целое; min/max типа при выходе за диапазон (включая ±Inf)

    Raises:
        ArgumentOutOfRangeError: Если value — NaN

    Examples:
        >>> round_saturating(2.5, INT32)
        3
        >>> round_saturating(1e300, INT32)
        2147483647
        >>> round_saturating(-5.0, UINT32)
        0
    """
    if math.isnan(value):
        raise ArgumentOutOfRangeError("value", "cannot round NaN to an integer")

    if value < integer_type.min_value:
        return integer_type.min_value
    if value > integer_type.max_value:
        return integer_type.max_value

    return integer_type.saturate(round_half_away_from_zero(value))


def round_to_int(value: float) -> int:
    """Округление до int32 с насыщением."""
    return round_saturating(value, INT32)


def round_to_long(value: float) -> int:
    """Округление до int64 с насыщением."""
    return round_saturating(value, INT64)


def round_to_uint(value: float) -> int:
    """Округление до uint32 с насыщением."""
    return round_saturating(value, UINT32)


def round_to_ulong(value: float) -> int:
    """Округление до uint64 с насыщением."""
    return round_saturating(value, UINT64)


# =============================================================================
# CLAMP
# =============================================================================


def clamp(
    value: Any,
    min_value: Any = None,
    max_value: Any = None,
    value_type: IntegerType | None = None,
) -> Any:
    """
    Ограничение значения в диапазоне [min_value, max_value].

    Если min_value > max_value, границы переставляются: clamp(6, 5, 3) == 5,
    так же как clamp(6, 3, 5).

    Приведение границы к типу значения:
    - value_type задан: float-граница округляется (половина от нуля),
      затем насыщается до диапазона value_type
    - value — numpy floating: граница насыщается до конечного диапазона
      этого типа (np.finfo)
    - value — int, граница — float: граница округляется
    - value — float/Decimal: граница приводится к type(value)

    Args:
        value: Исходное значение
        min_value: Нижняя граница (optional)
        max_value: Верхняя граница (optional)
        value_type: Целочисленный тип фиксированной ширины для value (optional)

    Returns:
        value, если min_value <= value <= max_value; иначе ближайшая граница,
        приведённая к типу value

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(15, 10, 0)
        10
        >>> clamp(3, -1e10, 1e10, value_type=UINT8)
        3
        >>> clamp(200, 0, 100.6, value_type=UINT8)
        101
        >>> clamp(0, 300, 1000, value_type=UINT8)
        255
    """
    if min_value is not None and max_value is not None and min_value > max_value:
        min_value, max_value = max_value, min_value

    if min_value is not None and value < min_value:
        bound = min_value
    elif max_value is not None and value > max_value:
        bound = max_value
    else:
        return value

    return _coerce_bound(value, bound, value_type)


def _coerce_bound(value: Any, bound: Any, value_type: IntegerType | None) -> Any:
    """Приведение границы к типу значения с насыщением."""
    if value_type is not None:
        if isinstance(bound, (float, np.floating, Decimal)):
            if math.isnan(bound):
                raise ArgumentOutOfRangeError("bound", "clamp bound must not be NaN")
            if bound < value_type.min_value:
                return value_type.min_value
            if bound > value_type.max_value:
                return value_type.max_value
            bound = round_half_away_from_zero(bound)
        coerced = value_type.saturate(int(bound))
        if coerced != bound:
            logger.debug(
                "clamp bound %s saturated to %s range: %s",
                bound,
                value_type.name,
                coerced,
            )
        return coerced

    if isinstance(value, np.floating):
        info = np.finfo(type(value))
        if bound < info.min:
            return type(value)(info.min)
        if bound > info.max:
            return type(value)(info.max)
        return type(value)(bound)

    if isinstance(value, int) and not isinstance(value, bool):
        if isinstance(bound, (float, np.floating)):
            return round_half_away_from_zero(float(bound))
        return bound

    if isinstance(value, (float, Decimal)) and type(bound) is not type(value):
        return type(value)(bound)

    return bound
