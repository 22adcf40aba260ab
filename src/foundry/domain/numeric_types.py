"""
Numeric Types — Fixed-width integer descriptors and numeric capabilities

В Python int неограничен, поэтому ширина целочисленного типа задаётся явно
через дескриптор IntegerType. Он используется для насыщения (saturation):
значения вне диапазона типа обрезаются до его min/max вместо переполнения.

Capability-протоколы описывают по одной операции на протокол
(сложение, вычитание, умножение, порог near-zero) и комбинируются
в сигнатурах helper-функций.
"""

from typing import Any, Final, Protocol, runtime_checkable

from pydantic import BaseModel, Field, field_validator

# =============================================================================
# CAPABILITY PROTOCOLS
# =============================================================================


class SupportsAdd(Protocol):
    """Тип поддерживает сложение."""

    def __add__(self, other: Any) -> Any: ...


class SupportsSub(Protocol):
    """Тип поддерживает вычитание."""

    def __sub__(self, other: Any) -> Any: ...


class SupportsMul(Protocol):
    """Тип поддерживает умножение."""

    def __mul__(self, other: Any) -> Any: ...


class SupportsLessThan(Protocol):
    """Тип поддерживает сравнение через <."""

    def __lt__(self, other: Any) -> bool: ...


@runtime_checkable
class SupportsNearlyZero(Protocol):
    """
    Тип сам задаёт порог near-zero.

    nearly_zero — величина, ниже которой значение считается нулём при
    сравнениях. Это не машинный epsilon (минимальное отличимое от нуля
    значение), а толерантность для подавления ошибок округления.
    """

    @property
    def nearly_zero(self) -> float: ...


# =============================================================================
# FIXED-WIDTH INTEGER TYPES
# =============================================================================

_ALLOWED_BITS: Final[frozenset[int]] = frozenset({8, 16, 32, 64})


class IntegerType(BaseModel):
    """
    Дескриптор целочисленного типа фиксированной ширины.

    Immutable модель (frozen=True). Диапазон вычисляется из bits и signed:
    - signed:   [-2^(bits-1), 2^(bits-1) - 1]
    - unsigned: [0, 2^bits - 1]
    """

    name: str = Field(..., min_length=1, description="Имя типа (например, 'int32')")
    bits: int = Field(..., gt=0, description="Ширина в битах (8, 16, 32, 64)")
    signed: bool = Field(..., description="Знаковый тип")

    model_config = {"frozen": True}

    @field_validator("bits")
    @classmethod
    def validate_bits(cls, v: int) -> int:
        """Поддерживаются только стандартные ширины."""
        if v not in _ALLOWED_BITS:
            raise ValueError(f"bits must be one of {sorted(_ALLOWED_BITS)}, got {v}")
        return v

    @property
    def min_value(self) -> int:
        """Минимальное представимое значение."""
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max_value(self) -> int:
        """Максимальное представимое значение."""
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    def contains(self, value: float) -> bool:
        """Проверка, что value лежит в диапазоне типа."""
        return self.min_value <= value <= self.max_value

    def saturate(self, value: int) -> int:
        """
        Насыщение значения до диапазона типа.

        Examples:
            >>> UINT8.saturate(300)
            255
            >>> INT8.saturate(-1000)
            -128
        """
        if value < self.min_value:
            return self.min_value
        if value > self.max_value:
            return self.max_value
        return value


INT8: Final[IntegerType] = IntegerType(name="int8", bits=8, signed=True)
UINT8: Final[IntegerType] = IntegerType(name="uint8", bits=8, signed=False)
INT16: Final[IntegerType] = IntegerType(name="int16", bits=16, signed=True)
UINT16: Final[IntegerType] = IntegerType(name="uint16", bits=16, signed=False)
INT32: Final[IntegerType] = IntegerType(name="int32", bits=32, signed=True)
UINT32: Final[IntegerType] = IntegerType(name="uint32", bits=32, signed=False)
INT64: Final[IntegerType] = IntegerType(name="int64", bits=64, signed=True)
UINT64: Final[IntegerType] = IntegerType(name="uint64", bits=64, signed=False)
