"""Digits — Результат разбора символа-цифры

Символ может быть обычной цифрой ('0'..'9'), подстрочной (U+2080..U+2089)
или надстрочной (U+2070, U+00B9, U+00B2, U+00B3, U+2074..U+2079).
"""

from enum import Enum

from pydantic import BaseModel, Field


class DigitFamily(str, Enum):
    """Семейство глифов цифры."""

    PLAIN = "plain"
    SUBSCRIPT = "subscript"
    SUPERSCRIPT = "superscript"


class ParsedDigit(BaseModel):
    """Разобранная цифра: численное значение и семейство глифа."""

    value: int = Field(..., ge=0, le=9, description="Значение цифры [0, 9]")
    family: DigitFamily = Field(..., description="Семейство глифа")

    model_config = {"frozen": True}

    @property
    def is_subscript(self) -> bool:
        return self.family is DigitFamily.SUBSCRIPT

    @property
    def is_superscript(self) -> bool:
        return self.family is DigitFamily.SUPERSCRIPT
