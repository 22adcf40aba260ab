"""
Geometry — Angle between 3D vectors
"""

from typing import Sequence

import numpy as np

from src.foundry.contracts.arguments import ArgumentError, require_not_none


def angle_between(first: Sequence[float], second: Sequence[float]) -> float:
    """
    Угол между двумя 3D-векторами в радианах.

    Формула:
        atan2(|a × b|, a · b)

    Устойчива для почти параллельных векторов, в отличие от acos(cos θ).

    Args:
        first: Первый вектор (3 компоненты)
        second: Второй вектор (3 компоненты)

    Returns:
        Угол в [0, π]

    Raises:
        ArgumentNullError: Если вектор равен None
        ArgumentError: Если вектор не из 3 компонент

    Examples:
        >>> angle_between((1, 0, 0), (0, 1, 0))  # doctest: +ELLIPSIS
        1.5707963...
    """
    a = _as_vector3(require_not_none(first, "first"), "first")
    b = _as_vector3(require_not_none(second, "second"), "second")
    return float(np.arctan2(np.linalg.norm(np.cross(a, b)), np.dot(a, b)))


def _as_vector3(value: Sequence[float], name: str) -> np.ndarray:
    vector = np.asarray(value, dtype=np.float64)
    if vector.shape != (3,):
        raise ArgumentError(name, f"{name} must have exactly 3 components, got shape {vector.shape}")
    return vector
