"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Пороги near-zero для double / single / пользовательских типов
2. Near-equal с относительной толерантностью
3. Snap-to и snap-to-zero
4. Граничные случаи (строгость порога, знак нуля, Decimal)
"""

import math
from decimal import Decimal

import numpy as np
import pytest

from src.foundry.contracts import ArgumentOutOfRangeError
from src.foundry.math.numerical_safeguards import (
    NEARLY_ZERO,
    NEARLY_ZERO_SINGLE,
    epsilon_for,
    is_nearly_equal,
    is_nearly_zero,
    near_zero_threshold,
    snap_to,
    snap_to_zero,
    zero_like,
)


class CoarseFloat(float):
    """float с собственным порогом near-zero"""

    nearly_zero = 0.01


# =============================================================================
# ТЕСТЫ ПОРОГОВ
# =============================================================================


class TestNearZeroThreshold:
    """Тесты для near_zero_threshold"""

    def test_constants(self) -> None:
        """Значения порогов"""
        assert NEARLY_ZERO == 1e-15
        assert NEARLY_ZERO_SINGLE == 1e-6

    def test_double_threshold(self) -> None:
        """float и numpy.float64 используют порог double"""
        assert near_zero_threshold(1.0) == NEARLY_ZERO
        assert near_zero_threshold(np.float64(1.0)) == NEARLY_ZERO

    def test_single_threshold(self) -> None:
        """numpy.float32 использует порог single"""
        assert near_zero_threshold(np.float32(1.0)) == NEARLY_ZERO_SINGLE

    def test_custom_threshold(self) -> None:
        """Тип с атрибутом nearly_zero задаёт порог сам"""
        assert near_zero_threshold(CoarseFloat(1.0)) == 0.01


# =============================================================================
# ТЕСТЫ NEAR-ZERO
# =============================================================================


class TestIsNearlyZero:
    """Тесты для is_nearly_zero"""

    def test_tiny_values_are_zero(self) -> None:
        """Значения меньше 1e-15 считаются нулём"""
        assert is_nearly_zero(1e-20)
        assert is_nearly_zero(-1e-16)
        assert is_nearly_zero(0.0)
        assert is_nearly_zero(-0.0)

    def test_regular_values_are_not_zero(self) -> None:
        """Обычные значения не ноль"""
        assert not is_nearly_zero(1e-3)
        assert not is_nearly_zero(-1.0)

    def test_threshold_is_strict(self) -> None:
        """Значение ровно на пороге не считается нулём"""
        assert not is_nearly_zero(1e-15)
        assert not is_nearly_zero(-1e-15)

    def test_single_precision(self) -> None:
        """float32 использует более грубый порог"""
        assert is_nearly_zero(np.float32(1e-7))
        assert not is_nearly_zero(np.float32(1e-5))

    def test_custom_type(self) -> None:
        """Пользовательский порог"""
        assert is_nearly_zero(CoarseFloat(0.005))
        assert not is_nearly_zero(CoarseFloat(0.05))

    def test_decimal_is_exact(self) -> None:
        """Decimal сравнивается с нулём точно"""
        assert is_nearly_zero(Decimal("0"))
        assert is_nearly_zero(Decimal("-0.000"))
        assert not is_nearly_zero(Decimal("1e-30"))

    def test_integers(self) -> None:
        """int поддерживается"""
        assert is_nearly_zero(0)
        assert not is_nearly_zero(1)


# =============================================================================
# ТЕСТЫ NEAR-EQUAL
# =============================================================================


class TestEpsilonFor:
    """Тесты для epsilon_for"""

    def test_scaled_by_larger_magnitude(self) -> None:
        """Epsilon масштабируется по большему модулю"""
        assert epsilon_for(-10.0, 5.0) == pytest.approx(10.0 * NEARLY_ZERO)
        assert epsilon_for(3.0, 100.0) == pytest.approx(100.0 * NEARLY_ZERO)

    def test_never_negative(self) -> None:
        """Epsilon неотрицателен для отрицательных операндов"""
        assert epsilon_for(-5.0, -7.0) > 0
        assert epsilon_for(0.0, 0.0) == 0.0

    def test_mixed_precision_uses_coarser_threshold(self) -> None:
        """float32 с float → порог single"""
        assert epsilon_for(np.float32(2.0), 1.0) == pytest.approx(2.0 * NEARLY_ZERO_SINGLE)


class TestIsNearlyEqual:
    """Тесты для is_nearly_equal"""

    def test_identical_values(self) -> None:
        """Одинаковые значения равны"""
        assert is_nearly_equal(1.0, 1.0)
        assert is_nearly_equal(0.0, -0.0)
        assert is_nearly_equal(math.inf, math.inf)

    def test_rounding_noise_is_equal(self) -> None:
        """Шум последнего бита считается равенством"""
        assert is_nearly_equal(1.0, 1.0000000000000002)
        assert is_nearly_equal(0.1 + 0.2, 0.3)

    def test_distinct_values_not_equal(self) -> None:
        """Различимые значения не равны"""
        assert not is_nearly_equal(1.0, 1.1)
        assert not is_nearly_equal(1.0, 1.000001)

    def test_tolerance_is_relative(self) -> None:
        """Толерантность растёт с модулем"""
        a = 1e20
        b = a + a * 5e-16
        assert abs(a - b) > 1.0
        assert is_nearly_equal(a, b)

    def test_negative_values(self) -> None:
        """Отрицательные операнды используют модуль для epsilon"""
        assert is_nearly_equal(-1.0, -1.0000000000000002)
        assert is_nearly_equal(-1e20, -1e20 - 1e20 * 5e-16)

    def test_zero_against_tiny_value(self) -> None:
        """Относительная толерантность около нуля почти точна"""
        assert not is_nearly_equal(0.0, 1e-20)

    def test_explicit_epsilon(self) -> None:
        """Явный epsilon"""
        assert is_nearly_equal(1.0, 1.05, epsilon=0.1)
        assert not is_nearly_equal(1.0, 1.2, epsilon=0.1)
        assert not is_nearly_equal(1.0, 1.1, epsilon=0.0)

    def test_negative_epsilon_raises(self) -> None:
        """Отрицательный epsilon вызывает ошибку"""
        with pytest.raises(ArgumentOutOfRangeError, match="epsilon must be non-negative"):
            is_nearly_equal(1.0, 2.0, epsilon=-0.1)

        with pytest.raises(ValueError):
            is_nearly_equal(1.0, 2.0, epsilon=-1e-9)

    def test_decimal_is_exact(self) -> None:
        """Decimal без epsilon сравнивается точно"""
        assert is_nearly_equal(Decimal("1.0"), Decimal("1.00"))
        assert not is_nearly_equal(Decimal("1"), Decimal("1.0000000001"))
        assert is_nearly_equal(Decimal("1"), Decimal("1.01"), epsilon=Decimal("0.1"))


# =============================================================================
# ТЕСТЫ SNAP
# =============================================================================


class TestSnapTo:
    """Тесты для snap_to"""

    def test_snaps_when_nearly_equal(self) -> None:
        """Почти равное значение привязывается к цели"""
        assert snap_to(0.1 + 0.2, 0.3) == 0.3

    def test_keeps_distinct_value(self) -> None:
        """Далёкое значение не меняется"""
        assert snap_to(0.5, 0.3) == 0.5


class TestSnapToZero:
    """Тесты для snap_to_zero"""

    def test_tiny_value_becomes_zero(self) -> None:
        """Почти ноль → точный ноль"""
        assert snap_to_zero(1e-20) == 0.0

    def test_negative_tiny_value_becomes_positive_zero(self) -> None:
        """Результат — положительный ноль, без -0.0"""
        assert math.copysign(1.0, snap_to_zero(-1e-20)) == 1.0

    def test_regular_value_unchanged(self) -> None:
        """Обычное значение не меняется"""
        assert snap_to_zero(0.5) == 0.5
        assert snap_to_zero(-3.0) == -3.0

    def test_preserves_numpy_type(self) -> None:
        """Тип numpy сохраняется"""
        result = snap_to_zero(np.float32(1e-7))
        assert isinstance(result, np.float32)
        assert result == 0


class TestZeroLike:
    """Тесты для zero_like"""

    def test_types(self) -> None:
        """Ноль того же типа"""
        assert isinstance(zero_like(Decimal("5")), Decimal)
        assert isinstance(zero_like(np.float32(3.0)), np.float32)
        assert zero_like(7) == 0
        assert zero_like(2.5) == 0.0
