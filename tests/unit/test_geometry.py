"""
Тесты для angle_between
"""

import math

import numpy as np
import pytest

from src.foundry.contracts import ArgumentError, ArgumentNullError
from src.foundry.math import angle_between


class TestAngleBetween:
    """Тесты для угла между 3D-векторами"""

    def test_orthogonal(self) -> None:
        """Ортогональные векторы → π/2"""
        assert angle_between((1, 0, 0), (0, 1, 0)) == pytest.approx(math.pi / 2)

    def test_parallel(self) -> None:
        """Сонаправленные векторы → 0"""
        assert angle_between((1, 0, 0), (2, 0, 0)) == pytest.approx(0.0)

    def test_opposite(self) -> None:
        """Противоположные векторы → π"""
        assert angle_between((1, 0, 0), (-1, 0, 0)) == pytest.approx(math.pi)

    def test_diagonal(self) -> None:
        """45 градусов"""
        assert angle_between((1, 0, 0), (1, 1, 0)) == pytest.approx(math.pi / 4)

    def test_nearly_parallel_is_stable(self) -> None:
        """Малый угол вычисляется без потери точности"""
        angle = angle_between((1.0, 0.0, 0.0), (1.0, 1e-9, 0.0))
        assert angle == pytest.approx(1e-9, rel=1e-6)

    def test_numpy_input(self) -> None:
        """numpy-массивы принимаются"""
        angle = angle_between(np.array([0.0, 0.0, 1.0]), np.array([0.0, 1.0, 0.0]))
        assert angle == pytest.approx(math.pi / 2)

    def test_wrong_dimension_raises(self) -> None:
        """Не 3 компоненты → ошибка"""
        with pytest.raises(ArgumentError, match="exactly 3 components"):
            angle_between((1, 0), (0, 1, 0))

    def test_none_raises(self) -> None:
        """None → ArgumentNullError"""
        with pytest.raises(ArgumentNullError):
            angle_between(None, (0, 1, 0))
