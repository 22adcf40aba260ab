"""
Domain models and value objects.

Fixed-width integer descriptors, numeric capability protocols, parsed digits.
"""

from src.foundry.domain.digits import DigitFamily, ParsedDigit
from src.foundry.domain.numeric_types import (
    INT8,
    INT16,
    INT32,
    INT64,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    IntegerType,
    SupportsAdd,
    SupportsLessThan,
    SupportsMul,
    SupportsNearlyZero,
    SupportsSub,
)

__all__ = [
    # Integer types
    "IntegerType",
    "INT8",
    "UINT8",
    "INT16",
    "UINT16",
    "INT32",
    "UINT32",
    "INT64",
    "UINT64",
    # Capability protocols
    "SupportsAdd",
    "SupportsSub",
    "SupportsMul",
    "SupportsLessThan",
    "SupportsNearlyZero",
    # Digits
    "DigitFamily",
    "ParsedDigit",
]
