"""
Numerals — Superscript/subscript rendering and digit parsing

Рендер числа глифами Unicode:
- цифры 0–9 и знаки +/- заменяются надстрочными/подстрочными глифами
- на первом символе, который не цифра и не знак (десятичный разделитель,
  экспонента, разделитель тысяч), рендер останавливается: в Unicode нет
  надстрочного/подстрочного десятичного разделителя
- если после рендера не осталось ни одного символа, возвращается исходная
  отформатированная строка без изменений

Таблицы глифов строятся один раз при импорте и доступны только на чтение.
"""

from types import MappingProxyType
from typing import Any, Final, Mapping

from src.foundry.domain.digits import DigitFamily, ParsedDigit

# =============================================================================
# ТАБЛИЦЫ ГЛИФОВ
# =============================================================================

_PLAIN_DIGITS: Final[str] = "0123456789"
_SUBSCRIPT_DIGITS: Final[str] = "₀₁₂₃₄₅₆₇₈₉"
_SUPERSCRIPT_DIGITS: Final[str] = "⁰¹²³⁴⁵⁶⁷⁸⁹"

SUBSCRIPT_PLUS: Final[str] = "₊"
SUBSCRIPT_MINUS: Final[str] = "₋"
SUPERSCRIPT_PLUS: Final[str] = "⁺"
SUPERSCRIPT_MINUS: Final[str] = "⁻"

# plain digit → glyph
SUBSCRIPTS: Final[Mapping[str, str]] = MappingProxyType(
    dict(zip(_PLAIN_DIGITS, _SUBSCRIPT_DIGITS))
)
SUPERSCRIPTS: Final[Mapping[str, str]] = MappingProxyType(
    dict(zip(_PLAIN_DIGITS, _SUPERSCRIPT_DIGITS))
)

# glyph → (value, family)
_DIGIT_LOOKUP: Final[Mapping[str, ParsedDigit]] = MappingProxyType(
    {
        **{
            char: ParsedDigit(value=value, family=DigitFamily.PLAIN)
            for value, char in enumerate(_PLAIN_DIGITS)
        },
        **{
            char: ParsedDigit(value=value, family=DigitFamily.SUBSCRIPT)
            for value, char in enumerate(_SUBSCRIPT_DIGITS)
        },
        **{
            char: ParsedDigit(value=value, family=DigitFamily.SUPERSCRIPT)
            for value, char in enumerate(_SUPERSCRIPT_DIGITS)
        },
    }
)


# =============================================================================
# RENDERING
# =============================================================================


def _render(
    value: Any,
    glyphs: Mapping[str, str],
    plus: str,
    minus: str,
    positive_sign: bool,
    postfix_sign: bool,
    format_spec: str,
) -> str:
    text = format(value, format_spec)
    body = text.strip()

    negative = body.startswith("-")
    explicit_plus = body.startswith("+")
    if negative or explicit_plus:
        body = body[1:]

    rendered = []
    for char in body:
        glyph = glyphs.get(char)
        if glyph is None:
            break
        rendered.append(glyph)

    if not rendered:
        return text

    if negative:
        sign = minus
    elif positive_sign or explicit_plus:
        sign = plus
    else:
        sign = ""

    digits = "".join(rendered)
    return digits + sign if postfix_sign else sign + digits


def to_superscript(
    value: Any,
    positive_sign: bool = False,
    postfix_sign: bool = False,
    format_spec: str = "",
) -> str:
    """
    Надстрочное представление числа.

    Args:
        value: Число (или уже отформатированная строка)
        positive_sign: Добавлять '⁺' для неотрицательных значений
        postfix_sign: Ставить знак в конце (иначе — в начале)
        format_spec: Спецификация format() для числа (default: "")

    Returns:
        Строка надстрочных глифов; исходный текст, если глифов не осталось

    Examples:
        >>> to_superscript(-5)
        '⁻⁵'
        >>> to_superscript(42, positive_sign=True)
        '⁺⁴²'
        >>> to_superscript(3, positive_sign=True, postfix_sign=True)
        '³⁺'
        >>> to_superscript(1.5)
        '¹'
        >>> to_superscript(float("nan"))
        'nan'
    """
    return _render(
        value,
        SUPERSCRIPTS,
        SUPERSCRIPT_PLUS,
        SUPERSCRIPT_MINUS,
        positive_sign,
        postfix_sign,
        format_spec,
    )


def to_subscript(
    value: Any,
    positive_sign: bool = False,
    postfix_sign: bool = False,
    format_spec: str = "",
) -> str:
    """
    Подстрочное представление числа.

    Examples:
        >>> to_subscript(123)
        '₁₂₃'
        >>> to_subscript(-7)
        '₋₇'
    """
    return _render(
        value,
        SUBSCRIPTS,
        SUBSCRIPT_PLUS,
        SUBSCRIPT_MINUS,
        positive_sign,
        postfix_sign,
        format_spec,
    )


# =============================================================================
# PARSING
# =============================================================================


def parse_digit(char: str) -> ParsedDigit | None:
    """
    Разбор символа как цифры: обычной, подстрочной или надстрочной.

    Args:
        char: Ровно один символ

    Returns:
        ParsedDigit или None, если символ не цифра

    Raises:
        ValueError: Если передано не ровно один символ

    Examples:
        >>> parse_digit("²").value
        2
        >>> parse_digit("x") is None
        True
    """
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"char must be a single character, got {char!r}")
    return _DIGIT_LOOKUP.get(char)
