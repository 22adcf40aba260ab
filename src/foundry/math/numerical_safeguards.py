"""
Numerical Safeguards — Near-zero & near-equal comparisons

Модуль обеспечивает сравнение чисел с плавающей точкой с учётом ошибок
округления:
- Near-zero: |value| < порог, зависящий от типа
- Near-equal: относительная толерантность, масштабируемая по модулю операндов
- Snap-to: привязка значения к цели при близости

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Epsilon всегда неотрицателен
2. Толерантность near-equal относительная (масштабируется по max(|a|, |b|)),
   а не фиксированная абсолютная
3. Decimal сравнивается точно (у Decimal нет ошибок двоичного округления)
"""

from decimal import Decimal
from typing import Any, Final

import numpy as np

from src.foundry.contracts.arguments import ArgumentOutOfRangeError
from src.foundry.domain.numeric_types import SupportsNearlyZero

# =============================================================================
# NEAR-ZERO ПОРОГИ
# =============================================================================

# Порог near-zero для double (float в Python, numpy.float64)
NEARLY_ZERO: Final[float] = 1e-15

# Порог near-zero для single (numpy.float32, numpy.float16)
# Меньшая точность типа требует более грубого порога
NEARLY_ZERO_SINGLE: Final[float] = 1e-6


# =============================================================================
# ПОРОГИ И EPSILON
# =============================================================================


def _is_single_precision(value: Any) -> bool:
    return isinstance(value, (np.float32, np.float16))


def near_zero_threshold(value: Any) -> float:
    """
    Порог near-zero для типа значения.

    Приоритет:
    1. Тип реализует SupportsNearlyZero → его nearly_zero
    2. numpy single/half precision → NEARLY_ZERO_SINGLE
    3. Иначе → NEARLY_ZERO

    Examples:
        >>> near_zero_threshold(1.0)
        1e-15
        >>> near_zero_threshold(np.float32(1.0))
        1e-06
    """
    if isinstance(value, SupportsNearlyZero):
        return value.nearly_zero
    if _is_single_precision(value):
        return NEARLY_ZERO_SINGLE
    return NEARLY_ZERO


def is_nearly_zero(value: Any) -> bool:
    """
    Проверка, близко ли значение к нулю.

    Алгоритм:
        -threshold < value < threshold

    Decimal сравнивается точно: value == 0.

    Args:
        value: Проверяемое значение

    Returns:
        True если |value| строго меньше порога

    Examples:
        >>> is_nearly_zero(1e-20)
        True
        >>> is_nearly_zero(1e-3)
        False
        >>> is_nearly_zero(np.float32(1e-7))
        True
    """
    if isinstance(value, Decimal):
        return value == 0
    threshold = near_zero_threshold(value)
    return -threshold < value < threshold


def epsilon_for(value: Any, other: Any) -> float:
    """
    Epsilon для сравнения двух значений, масштабированный по модулю.

    Алгоритм:
        max(|value|, |other|) * threshold

    Берётся более грубый из порогов двух операндов, поэтому сравнение
    float32 с float использует порог single precision.

    Returns:
        Неотрицательный epsilon
    """
    threshold = max(near_zero_threshold(value), near_zero_threshold(other))
    return float(max(abs(value), abs(other))) * threshold


def is_nearly_equal(value: Any, other: Any, epsilon: float | None = None) -> bool:
    """
    Сравнение значений с относительной толерантностью.

    Алгоритм:
        value == other или |value - other| < epsilon

    Если epsilon не задан, он вычисляется через epsilon_for, т.е. толерантность
    масштабируется с модулем операндов. Это сохраняет точность сравнения
    на широком динамическом диапазоне.

    Args:
        value: Первое значение
        other: Второе значение
        epsilon: Явная толерантность (optional, >= 0)

    Returns:
        True если значения почти равны

    Raises:
        ArgumentOutOfRangeError: Если epsilon < 0

    Examples:
        >>> is_nearly_equal(1.0, 1.0 + 1e-16)
        True
        >>> is_nearly_equal(1e10, 1e10 + 1e-6)
        True
        >>> is_nearly_equal(1.0, 1.1)
        False
    """
    if value == other:
        return True

    if epsilon is None:
        if isinstance(value, Decimal) or isinstance(other, Decimal):
            return False
        epsilon = epsilon_for(value, other)
    elif epsilon < 0:
        raise ArgumentOutOfRangeError(
            "epsilon", f"epsilon must be non-negative, got {epsilon}"
        )

    return abs(value - other) < epsilon


# =============================================================================
# SNAP
# =============================================================================


def snap_to(value: Any, target: Any) -> Any:
    """
    Привязка к цели: target если value почти равен ему, иначе value.

    Examples:
        >>> snap_to(0.30000000000000004, 0.3)
        0.3
        >>> snap_to(0.5, 0.3)
        0.5
    """
    return target if is_nearly_equal(value, target) else value


def snap_to_zero(value: Any) -> Any:
    """
    Привязка к нулю: точный ноль того же типа, если value почти ноль.

    Examples:
        >>> snap_to_zero(1e-20)
        0.0
        >>> snap_to_zero(0.5)
        0.5
    """
    if is_nearly_zero(value):
        return zero_like(value)
    return value


def zero_like(value: Any) -> Any:
    """Точный (положительный) ноль того же типа, что и value."""
    if isinstance(value, (np.floating, Decimal)):
        return type(value)(0)
    if isinstance(value, int):
        return 0
    return 0.0
