"""
Mappings — Null-safe lookups and key/value pairs

Отсутствие ключа — нормальный исход, выражаемый возвращаемым значением,
а не исключением. Контейнер никогда не модифицируется: проверка
выполняется через `key in mapping`, поэтому фабрика defaultdict
не срабатывает.
"""

from typing import Any, Callable, Hashable, Iterator, Mapping, NamedTuple, TypeVar

from src.foundry.contracts.arguments import ArgumentError, require_not_none

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


# =============================================================================
# LOOKUPS
# =============================================================================


def get_value_or_default(mapping: Mapping[K, V], key: K, default: V | None = None) -> V | None:
    """
    Значение по ключу или default, если ключа нет.

    Присутствующий ключ с "ложным" значением (0, "", False) возвращает
    сохранённое значение, а не default.

    Args:
        mapping: Словарь для поиска
        key: Ключ
        default: Значение при отсутствии ключа (default: None)

    Returns:
        mapping[key] или default

    Raises:
        ArgumentNullError: Если mapping или key равен None

    Examples:
        >>> get_value_or_default({"a": 0}, "a", 5)
        0
        >>> get_value_or_default({"a": 0}, "b", 5)
        5
    """
    require_not_none(mapping, "mapping")
    require_not_none(key, "key")
    if key in mapping:
        return mapping[key]
    return default


def get_value_or_zero(mapping: Mapping[K, V], key: K, value_type: Callable[[], V]) -> V:
    """
    Значение по ключу или "нулевое" значение типа (value_type()).

    Examples:
        >>> get_value_or_zero({}, "a", int)
        0
        >>> get_value_or_zero({}, "a", str)
        ''
    """
    require_not_none(value_type, "value_type")
    return get_value_or_default(mapping, key, value_type())


def get_value_or_none(mapping: Mapping[K, V], key: K) -> V | None:
    """Значение по ключу или None, если ключа нет."""
    return get_value_or_default(mapping, key, None)


# =============================================================================
# KEY/VALUE PAIRS
# =============================================================================


class KeyValuePair(NamedTuple):
    """Пара ключ/значение из ассоциативного контейнера."""

    key: Any
    value: Any


def deconstruct(pair: Any) -> tuple[Any, Any]:
    """
    Разбор пары на (key, value).

    Поддерживает KeyValuePair, любой 2-кортеж (например, элемент
    dict.items()) и объекты с атрибутами key/value.

    Raises:
        ArgumentNullError: Если pair равен None
        ArgumentError: Если pair не является парой
    """
    require_not_none(pair, "pair")
    if isinstance(pair, tuple):
        if len(pair) != 2:
            raise ArgumentError("pair", f"pair must have exactly 2 items, got {len(pair)}")
        return pair[0], pair[1]
    if hasattr(pair, "key") and hasattr(pair, "value"):
        return pair.key, pair.value
    raise ArgumentError("pair", f"cannot deconstruct {type(pair).__name__} into key and value")


def iter_pairs(mapping: Mapping[K, V]) -> Iterator[KeyValuePair]:
    """Ленивый обход словаря парами KeyValuePair."""
    require_not_none(mapping, "mapping")
    return (KeyValuePair(key, value) for key, value in mapping.items())
