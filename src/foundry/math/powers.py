"""
Powers — Square, cube and decimal square root

- square / cube: быстрое возведение в степень умножением. Для float
  значение near-zero даёт ровно 0 того же типа (без -0.0 и денормалов).
- sqrt_decimal: корень Decimal методом Ньютона с затравкой из math.sqrt.
"""

import logging
import math
from decimal import Decimal
from typing import Any, Final

from src.foundry.contracts.arguments import ArgumentOutOfRangeError
from src.foundry.math.numerical_safeguards import is_nearly_zero, zero_like

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Максимум итераций Ньютона для sqrt_decimal
# На практике сходимость достигается за <= 3 итерации; лимит защищает
# от осцилляции в последнем знаке при округлении контекста Decimal
SQRT_MAX_ITERATIONS: Final[int] = 16


# =============================================================================
# СТЕПЕНИ
# =============================================================================


def _is_exact(value: Any) -> bool:
    return isinstance(value, (int, Decimal))


def square(value: Any) -> Any:
    """
    Квадрат значения.

    Examples:
        >>> square(3)
        9
        >>> square(-1.5)
        2.25
        >>> square(1e-20)
        0.0
    """
    if not _is_exact(value) and is_nearly_zero(value):
        return zero_like(value)
    return value * value


def cube(value: Any) -> Any:
    """
    Куб значения.

    Examples:
        >>> cube(-3)
        -27
        >>> cube(Decimal("1.5"))
        Decimal('3.375')
    """
    if not _is_exact(value) and is_nearly_zero(value):
        return zero_like(value)
    return value * value * value


# =============================================================================
# DECIMAL SQRT
# =============================================================================


def sqrt_decimal(value: Decimal) -> Decimal:
    """
    Квадратный корень Decimal методом Ньютона.

    Алгоритм:
        current = sqrt(float(value))            # затравка
        current = (previous + value / previous) / 2
        повторять, пока current != previous (в точности текущего контекста)

    Args:
        value: Неотрицательное значение

    Returns:
        Положительный квадратный корень

    Raises:
        ArgumentOutOfRangeError: Если value < 0

    Examples:
        >>> sqrt_decimal(Decimal(4))
        Decimal('2')
        >>> sqrt_decimal(Decimal(0))
        Decimal('0')
    """
    if value < 0:
        raise ArgumentOutOfRangeError(
            "value", f"cannot take the square root of a negative value: {value}"
        )

    current = _initial_estimate(value)
    for iteration in range(1, SQRT_MAX_ITERATIONS + 1):
        previous = current
        if previous == 0:
            return Decimal(0)
        current = (previous + value / previous) / 2
        if current == previous:
            logger.debug("sqrt_decimal(%s) converged after %d iterations", value, iteration)
            return current

    logger.debug(
        "sqrt_decimal(%s) stopped after %d iterations without exact convergence",
        value,
        SQRT_MAX_ITERATIONS,
    )
    return current


def _initial_estimate(value: Decimal) -> Decimal:
    if value == 0:
        return Decimal(0)
    seed = math.sqrt(float(value))
    if math.isfinite(seed) and seed > 0:
        return Decimal(seed)
    # Вне диапазона double (переполнение или потеря значимости):
    # затравка по порядку величины
    return Decimal(10) ** (value.adjusted() // 2)
