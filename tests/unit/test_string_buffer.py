"""
Тесты для StringBuffer и trim-helpers
"""

import pytest

from src.foundry.contracts import ArgumentNullError
from src.foundry.text import StringBuffer, to_char_view, trim_end, trim_end_string


class TestStringBuffer:
    """Тесты для StringBuffer"""

    def test_append_and_insert_chain(self) -> None:
        """append / insert возвращают тот же буфер"""
        buffer = StringBuffer("abc")
        assert buffer.append("de").insert(0, ">") is buffer
        assert str(buffer) == ">abcde"

    def test_length_setter_truncates(self) -> None:
        """Уменьшение length обрезает буфер"""
        buffer = StringBuffer("hello")
        buffer.length = 2
        assert buffer == "he"
        assert len(buffer) == 2

    def test_length_setter_out_of_range(self) -> None:
        """length вне [0, len] → ValueError"""
        buffer = StringBuffer("abc")
        with pytest.raises(ValueError, match="length must be within"):
            buffer.length = 4

        with pytest.raises(ValueError):
            buffer.length = -1

    def test_indexing(self) -> None:
        """Индекс и срез"""
        buffer = StringBuffer("abcdef")
        assert buffer[0] == "a"
        assert buffer[-1] == "f"
        assert buffer[1:3] == "bc"

    def test_equality_and_repr(self) -> None:
        """Сравнение и repr"""
        assert StringBuffer("ab") == StringBuffer("ab")
        assert StringBuffer("ab") == "ab"
        assert StringBuffer("ab") != "abc"
        assert repr(StringBuffer("ab")) == "StringBuffer('ab')"

    def test_unhashable(self) -> None:
        """Изменяемый буфер не хешируется"""
        with pytest.raises(TypeError):
            hash(StringBuffer("ab"))


class TestTrimEnd:
    """Тесты для trim_end"""

    def test_whitespace(self) -> None:
        """По умолчанию удаляются пробельные символы"""
        assert trim_end(StringBuffer("abc  \n\t")) == "abc"

    def test_specific_char(self) -> None:
        """Удаление конкретного символа"""
        assert trim_end(StringBuffer("abc...."), ".") == "abc"
        assert trim_end(StringBuffer("a.b."), ".") == "a.b"

    def test_returns_same_buffer(self) -> None:
        """Буфер модифицируется на месте"""
        buffer = StringBuffer("abc  ")
        assert trim_end(buffer) is buffer
        assert buffer == "abc"

    def test_nothing_to_trim(self) -> None:
        """Без хвоста → без изменений"""
        assert trim_end(StringBuffer("abc")) == "abc"
        assert trim_end(StringBuffer("")) == ""

    def test_everything_trimmed(self) -> None:
        """Только пробелы → пустой буфер"""
        assert trim_end(StringBuffer("   ")) == ""

    def test_multi_char_raises(self) -> None:
        """trim_char из нескольких символов → ValueError"""
        with pytest.raises(ValueError, match="single character"):
            trim_end(StringBuffer("abc"), "ab")

    def test_none_buffer_raises(self) -> None:
        """None → ArgumentNullError"""
        with pytest.raises(ArgumentNullError):
            trim_end(None)


class TestTrimEndString:
    """Тесты для trim_end_string"""

    def test_repeated_suffix(self) -> None:
        """Повторяющийся суффикс удаляется целиком"""
        buffer, trimmed = trim_end_string(StringBuffer("abcxyxy"), "xy")
        assert buffer == "abc"
        assert trimmed is True

    def test_no_suffix(self) -> None:
        """Нет суффикса → без изменений, False"""
        buffer, trimmed = trim_end_string(StringBuffer("abc"), "xy")
        assert buffer == "abc"
        assert trimmed is False

    def test_partial_suffix_kept(self) -> None:
        """Неполное вхождение суффикса не удаляется"""
        buffer, trimmed = trim_end_string(StringBuffer("abcxyx"), "xy")
        assert buffer == "abcxyx"
        assert trimmed is False

    def test_whole_buffer(self) -> None:
        """Буфер целиком из суффикса → пустой"""
        buffer, trimmed = trim_end_string(StringBuffer("xyxy"), "xy")
        assert buffer == ""
        assert trimmed is True

    def test_buffer_shorter_than_suffix(self) -> None:
        """Буфер короче суффикса"""
        buffer, trimmed = trim_end_string(StringBuffer("y"), "xy")
        assert buffer == "y"
        assert trimmed is False

    @pytest.mark.parametrize("trim_string", ["", None])
    def test_empty_trim_string(self, trim_string: str | None) -> None:
        """Пустая строка или None → без изменений"""
        buffer, trimmed = trim_end_string(StringBuffer("abc  "), trim_string)
        assert buffer == "abc  "
        assert trimmed is False

    def test_whitespace_trim_string(self) -> None:
        """Строка из пробелов → удаление любых пробельных символов"""
        buffer, trimmed = trim_end_string(StringBuffer("abc \t "), " ")
        assert buffer == "abc"
        assert trimmed is True

        buffer, trimmed = trim_end_string(StringBuffer("abc"), "  ")
        assert buffer == "abc"
        assert trimmed is False


class TestToCharView:
    """Тесты для to_char_view"""

    def test_snapshot(self) -> None:
        """Снимок символов не зависит от последующих изменений буфера"""
        buffer = StringBuffer("abc")
        view = to_char_view(buffer)
        buffer.append("d")

        assert view == ("a", "b", "c")
        assert isinstance(view, tuple)

    def test_empty(self) -> None:
        """Пустой буфер"""
        assert to_char_view(StringBuffer()) == ()

    def test_none_raises(self) -> None:
        """None → ArgumentNullError"""
        with pytest.raises(ArgumentNullError):
            to_char_view(None)
