"""
String Buffer — Mutable character buffer and trim helpers

StringBuffer хранит символы в списке, поэтому усечение с конца выполняется
без пересоздания строки. Helper-функции модифицируют переданный буфер
и возвращают его же.
"""

from typing import Iterable, overload

from src.foundry.contracts.arguments import require_not_none


class StringBuffer:
    """
    Изменяемый буфер символов.

    Examples:
        >>> buffer = StringBuffer("abc")
        >>> buffer.append("de").insert(0, ">")
        StringBuffer('>abcde')
        >>> buffer.length = 3
        >>> str(buffer)
        '>ab'
    """

    __slots__ = ("_chars",)

    def __init__(self, initial: str = ""):
        self._chars: list[str] = list(initial)

    @property
    def length(self) -> int:
        return len(self._chars)

    @length.setter
    def length(self, value: int) -> None:
        if value < 0 or value > len(self._chars):
            raise ValueError(
                f"length must be within [0, {len(self._chars)}], got {value}"
            )
        del self._chars[value:]

    def append(self, text: str) -> "StringBuffer":
        self._chars.extend(text)
        return self

    def insert(self, index: int, text: str) -> "StringBuffer":
        self._chars[index:index] = list(text)
        return self

    def chars(self) -> Iterable[str]:
        """Итератор по символам без сборки строки."""
        return iter(self._chars)

    def __len__(self) -> int:
        return len(self._chars)

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> str: ...

    def __getitem__(self, index: int | slice) -> str:
        if isinstance(index, slice):
            return "".join(self._chars[index])
        return self._chars[index]

    def __str__(self) -> str:
        return "".join(self._chars)

    def __repr__(self) -> str:
        return f"StringBuffer({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StringBuffer):
            return self._chars == other._chars
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]


# =============================================================================
# TRIM
# =============================================================================


def trim_end(buffer: StringBuffer, trim_char: str | None = None) -> StringBuffer:
    """
    Удаление с конца буфера символа trim_char или пробельных символов.

    Args:
        buffer: Буфер (модифицируется)
        trim_char: Символ для удаления (default: любой пробельный)

    Returns:
        Тот же буфер

    Examples:
        >>> str(trim_end(StringBuffer("abc  \\n")))
        'abc'
        >>> str(trim_end(StringBuffer("abc...."), "."))
        'abc'
    """
    require_not_none(buffer, "buffer")
    if trim_char is not None and len(trim_char) != 1:
        raise ValueError(f"trim_char must be a single character, got {trim_char!r}")

    end = len(buffer)
    while end > 0:
        char = buffer[end - 1]
        if trim_char is None:
            if not char.isspace():
                break
        elif char != trim_char:
            break
        end -= 1

    if end < len(buffer):
        buffer.length = end
    return buffer


def trim_end_string(buffer: StringBuffer, trim_string: str | None) -> tuple[StringBuffer, bool]:
    """
    Повторное удаление подстроки trim_string с конца буфера.

    Правила:
    - trim_string пустая или None → без изменений
    - trim_string только из пробельных символов → trim_end по пробелам

    Args:
        buffer: Буфер (модифицируется)
        trim_string: Подстрока для удаления

    Returns:
        (buffer, trimmed): trimmed=True, если что-то было удалено

    Examples:
        >>> buffer, trimmed = trim_end_string(StringBuffer("abcxyxy"), "xy")
        >>> (str(buffer), trimmed)
        ('abc', True)
    """
    require_not_none(buffer, "buffer")
    if not trim_string:
        return buffer, False

    if trim_string.isspace():
        length = len(buffer)
        trim_end(buffer)
        return buffer, len(buffer) != length

    size = len(trim_string)
    trimmed = False
    while len(buffer) >= size and buffer[len(buffer) - size:] == trim_string:
        buffer.length = len(buffer) - size
        trimmed = True

    return buffer, trimmed


def to_char_view(buffer: StringBuffer) -> tuple[str, ...]:
    """
    Read-only снимок символов буфера.

    Символы копируются в кортеж без промежуточной сборки str.
    """
    require_not_none(buffer, "buffer")
    return tuple(buffer.chars())
