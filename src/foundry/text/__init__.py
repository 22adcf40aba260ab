"""
Text helpers

Надстрочные/подстрочные числа, разбор цифр, изменяемый буфер символов.
"""

from src.foundry.text.numerals import (
    SUBSCRIPT_MINUS,
    SUBSCRIPT_PLUS,
    SUBSCRIPTS,
    SUPERSCRIPT_MINUS,
    SUPERSCRIPT_PLUS,
    SUPERSCRIPTS,
    parse_digit,
    to_subscript,
    to_superscript,
)
from src.foundry.text.string_buffer import (
    StringBuffer,
    to_char_view,
    trim_end,
    trim_end_string,
)

__all__ = [
    # Numerals — Glyphs
    "SUBSCRIPTS",
    "SUPERSCRIPTS",
    "SUBSCRIPT_MINUS",
    "SUBSCRIPT_PLUS",
    "SUPERSCRIPT_MINUS",
    "SUPERSCRIPT_PLUS",
    # Numerals — Functions
    "parse_digit",
    "to_subscript",
    "to_superscript",
    # String buffer
    "StringBuffer",
    "to_char_view",
    "trim_end",
    "trim_end_string",
]
