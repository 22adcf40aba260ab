"""
Argument Contracts

Таксономия ошибок аргументов и guard-функции, общие для всех helper-модулей.
"""

from .arguments import (
    ArgumentError,
    ArgumentNullError,
    ArgumentOutOfRangeError,
    require_callable,
    require_not_none,
)

__all__ = [
    # Exceptions
    "ArgumentError",
    "ArgumentNullError",
    "ArgumentOutOfRangeError",
    # Guards
    "require_callable",
    "require_not_none",
]
