"""
Argument Contracts — Ошибки аргументов и guard-функции

Таксономия ошибок:
- ArgumentNullError: обязательный аргумент равен None
- ArgumentOutOfRangeError: аргумент вне допустимой области
  (отрицательный корень, неразрешимый inverse lerp для Decimal и т.п.)

Ожидаемое отсутствие (нет ключа, пустая последовательность) ошибкой НЕ является
и выражается через возвращаемое значение.

Все ошибки наследуют ValueError, поэтому вызывающий код может ловить
их как обычные ошибки валидации.
"""

from typing import Any, Callable, TypeVar

T = TypeVar("T")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ArgumentError(ValueError):
    """
    Базовая ошибка невалидного аргумента.

    Хранит имя параметра в param_name для диагностики.
    """

    def __init__(self, param_name: str, message: str | None = None):
        self.param_name = param_name
        super().__init__(message or f"Invalid argument: {param_name}")


class ArgumentNullError(ArgumentError):
    """Обязательный аргумент равен None."""

    def __init__(self, param_name: str, message: str | None = None):
        super().__init__(param_name, message or f"{param_name} must not be None")


class ArgumentOutOfRangeError(ArgumentError):
    """Аргумент вне области определения операции."""

    def __init__(self, param_name: str, message: str | None = None):
        super().__init__(param_name, message or f"{param_name} is out of range")


# =============================================================================
# GUARDS
# =============================================================================


def require_not_none(value: T | None, name: str) -> T:
    """
    Проверка, что аргумент не None.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        ArgumentNullError: Если value is None
    """
    if value is None:
        raise ArgumentNullError(name)
    return value


def require_callable(value: Any, name: str) -> Callable[..., Any]:
    """
    Проверка, что аргумент — не None и вызываемый объект.

    Raises:
        ArgumentNullError: Если value is None
        TypeError: Если value не callable
    """
    require_not_none(value, name)
    if not callable(value):
        raise TypeError(f"{name} must be callable, got {type(value).__name__}")
    return value
