"""
Core math modules

Численные примитивы: сравнения с толерантностью, интерполяция, clamp
с насыщением, степени и корень Decimal.
"""

# Numerical Safeguards
from src.foundry.math.numerical_safeguards import (
    # Thresholds
    NEARLY_ZERO,
    NEARLY_ZERO_SINGLE,
    # Comparisons
    epsilon_for,
    is_nearly_equal,
    is_nearly_zero,
    near_zero_threshold,
    # Snap
    snap_to,
    snap_to_zero,
    zero_like,
)

# Interpolation
from src.foundry.math.interpolation import inverse_lerp, lerp

# Clamping
from src.foundry.math.clamping import (
    clamp,
    round_half_away_from_zero,
    round_saturating,
    round_to_int,
    round_to_long,
    round_to_uint,
    round_to_ulong,
)

# Powers
from src.foundry.math.powers import SQRT_MAX_ITERATIONS, cube, sqrt_decimal, square

# Geometry
from src.foundry.math.geometry import angle_between

__all__ = [
    # Numerical Safeguards — Thresholds
    "NEARLY_ZERO",
    "NEARLY_ZERO_SINGLE",
    # Numerical Safeguards — Comparisons
    "epsilon_for",
    "is_nearly_equal",
    "is_nearly_zero",
    "near_zero_threshold",
    # Numerical Safeguards — Snap
    "snap_to",
    "snap_to_zero",
    "zero_like",
    # Interpolation
    "inverse_lerp",
    "lerp",
    # Clamping
    "clamp",
    "round_half_away_from_zero",
    "round_saturating",
    "round_to_int",
    "round_to_long",
    "round_to_uint",
    "round_to_ulong",
    # Powers
    "SQRT_MAX_ITERATIONS",
    "cube",
    "sqrt_decimal",
    "square",
    # Geometry
    "angle_between",
]
