"""
Sequences — Extremum search and nullable-filtering projections

Поиск экстремума (index_of_max / index_of_min):
- Один проход вперёд, хранится текущий лучший элемент и его индекс
- Обновление только при строгом сравнении → выигрывает ПЕРВОЕ вхождение
- Пустая последовательность → -1
- NaN (float, numpy, Decimal) упорядочен ниже любого числа: не может быть
  максимумом среди чисел и является минимумом
- Варианты упорядочивания: естественный порядок, проекция (selector),
  явный comparer(a, b) → отрицательное / 0 / положительное
- Два семейства ширины индекса: 32-bit (index_of_*) и 64-bit (long_index_of_*)

Проекции с фильтрацией None (select_non_null / select_has_value / select_many_*):
- Ленивые генераторы, порядок источника сохраняется
- Трансформация вызывается не более одного раза на элемент
- Аргументы проверяются сразу при вызове, до потребления элементов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. None в обязательном аргументе → ArgumentNullError до начала работы
2. Отсутствие результата (пустая последовательность, None) — не ошибка
"""

import math
from decimal import Decimal
from typing import Any, Callable, Iterable, Iterator, Optional, TypeVar

import numpy as np

from src.foundry.contracts.arguments import require_callable, require_not_none
from src.foundry.domain.numeric_types import INT32, INT64, IntegerType

T = TypeVar("T")
R = TypeVar("R")

Comparer = Callable[[Any, Any], int]


# =============================================================================
# FIRST
# =============================================================================


def first_or_none(
    source: Iterable[T],
    predicate: Callable[[T], bool] | None = None,
) -> T | None:
    """
    Первый элемент (удовлетворяющий predicate) или None.

    Examples:
        >>> first_or_none([3, 4, 5])
        3
        >>> first_or_none([3, 4, 5], lambda x: x % 2 == 0)
        4
        >>> first_or_none([]) is None
        True
    """
    require_not_none(source, "source")
    if predicate is not None:
        require_callable(predicate, "predicate")
    for item in source:
        if predicate is None or predicate(item):
            return item
    return None


# =============================================================================
# EXTREMUM SEARCH
# =============================================================================


def _index_of_extremum(
    source: Iterable[Any],
    better: Callable[[Any, Any], bool],
    selector: Callable[[Any], Any] | None,
    index_type: IntegerType,
) -> int:
    """
    Индекс первого элемента, для которого better(candidate, champion) не
    превзойдён ни одним последующим.

    better — строгое сравнение; равные значения чемпиона не меняют.
    """
    best_index = -1
    best_value: Any = None

    for index, item in enumerate(source):
        if index > index_type.max_value:
            raise OverflowError(
                f"sequence index {index} exceeds {index_type.name} range; "
                f"use the long_index_of_* family"
            )
        value = selector(item) if selector is not None else item
        if best_index < 0 or better(value, best_value):
            best_value = value
            best_index = index

    return best_index


def _is_nan(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    return isinstance(value, (float, np.floating)) and math.isnan(value)


def _greater(a: Any, b: Any) -> bool:
    # NaN меньше любого числа и равен другому NaN
    if _is_nan(b):
        return not _is_nan(a)
    if _is_nan(a):
        return False
    return a > b


def _less(a: Any, b: Any) -> bool:
    if _is_nan(a):
        return not _is_nan(b)
    if _is_nan(b):
        return False
    return a < b


def _comparer_greater(comparer: Comparer) -> Callable[[Any, Any], bool]:
    return lambda a, b: comparer(a, b) > 0


def _comparer_less(comparer: Comparer) -> Callable[[Any, Any], bool]:
    return lambda a, b: comparer(a, b) < 0


def index_of_max(source: Iterable[Any]) -> int:
    """
    Индекс первого вхождения максимума или -1 для пустой последовательности.

    Examples:
        >>> index_of_max([1, 5, 3, 5])
        1
        >>> index_of_max([])
        -1
    """
    require_not_none(source, "source")
    return _index_of_extremum(source, _greater, None, INT32)


def index_of_max_by(source: Iterable[T], selector: Callable[[T], Any]) -> int:
    """
    Индекс первого элемента с максимальным selector(item).

    Examples:
        >>> index_of_max_by(["a", "ccc", "bb", "ddd"], len)
        1
    """
    require_not_none(source, "source")
    require_callable(selector, "selector")
    return _index_of_extremum(source, _greater, selector, INT32)


def index_of_max_with(source: Iterable[T], comparer: Comparer) -> int:
    """Индекс первого максимума по comparer(a, b)."""
    require_not_none(source, "source")
    require_callable(comparer, "comparer")
    return _index_of_extremum(source, _comparer_greater(comparer), None, INT32)


def index_of_min(source: Iterable[Any]) -> int:
    """
    Индекс первого вхождения минимума или -1 для пустой последовательности.

    Examples:
        >>> index_of_min([4, 1, 3, 1])
        1
    """
    require_not_none(source, "source")
    return _index_of_extremum(source, _less, None, INT32)


def index_of_min_by(source: Iterable[T], selector: Callable[[T], Any]) -> int:
    """Индекс первого элемента с минимальным selector(item)."""
    require_not_none(source, "source")
    require_callable(selector, "selector")
    return _index_of_extremum(source, _less, selector, INT32)


def index_of_min_with(source: Iterable[T], comparer: Comparer) -> int:
    """Индекс первого минимума по comparer(a, b)."""
    require_not_none(source, "source")
    require_callable(comparer, "comparer")
    return _index_of_extremum(source, _comparer_less(comparer), None, INT32)


def long_index_of_max(source: Iterable[Any]) -> int:
    """index_of_max с 64-bit диапазоном индекса."""
    require_not_none(source, "source")
    return _index_of_extremum(source, _greater, None, INT64)


def long_index_of_max_by(source: Iterable[T], selector: Callable[[T], Any]) -> int:
    """index_of_max_by с 64-bit диапазоном индекса."""
    require_not_none(source, "source")
    require_callable(selector, "selector")
    return _index_of_extremum(source, _greater, selector, INT64)


def long_index_of_max_with(source: Iterable[T], comparer: Comparer) -> int:
    """index_of_max_with с 64-bit диапазоном индекса."""
    require_not_none(source, "source")
    require_callable(comparer, "comparer")
    return _index_of_extremum(source, _comparer_greater(comparer), None, INT64)


def long_index_of_min(source: Iterable[Any]) -> int:
    """index_of_min с 64-bit диапазоном индекса."""
    require_not_none(source, "source")
    return _index_of_extremum(source, _less, None, INT64)


def long_index_of_min_by(source: Iterable[T], selector: Callable[[T], Any]) -> int:
    """index_of_min_by с 64-bit диапазоном индекса."""
    require_not_none(source, "source")
    require_callable(selector, "selector")
    return _index_of_extremum(source, _less, selector, INT64)


def long_index_of_min_with(source: Iterable[T], comparer: Comparer) -> int:
    """index_of_min_with с 64-bit диапазоном индекса."""
    require_not_none(source, "source")
    require_callable(comparer, "comparer")
    return _index_of_extremum(source, _comparer_less(comparer), None, INT64)


def _item_with_extremum(
    source: Iterable[T],
    selector: Callable[[T], Any],
    better: Callable[[Any, Any], bool],
) -> T | None:
    best_item: T | None = None
    best_value: Any = None
    found = False
    for item in source:
        value = selector(item)
        if not found or better(value, best_value):
            best_item = item
            best_value = value
            found = True
    return best_item


def item_with_max(source: Iterable[T], selector: Callable[[T], Any]) -> T | None:
    """
    Первый элемент с максимальным selector(item) или None для пустой
    последовательности.

    Examples:
        >>> item_with_max(["a", "ccc", "bb", "ddd"], len)
        'ccc'
    """
    require_not_none(source, "source")
    require_callable(selector, "selector")
    return _item_with_extremum(source, selector, _greater)


def item_with_min(source: Iterable[T], selector: Callable[[T], Any]) -> T | None:
    """Первый элемент с минимальным selector(item) или None."""
    require_not_none(source, "source")
    require_callable(selector, "selector")
    return _item_with_extremum(source, selector, _less)


# =============================================================================
# NULLABLE-FILTERING PROJECTIONS
# =============================================================================


def _project(
    source: Iterable[Any],
    selector: Callable[..., Any] | None,
    with_index: bool,
) -> Iterator[Any]:
    if selector is None:
        yield from source
    elif with_index:
        for index, item in enumerate(source):
            yield selector(item, index)
    else:
        for item in source:
            yield selector(item)


def _project_many(
    source: Iterable[Any],
    selector: Callable[..., Iterable[Any]],
    with_index: bool,
) -> Iterator[Any]:
    for projected in _project(source, selector, with_index):
        if projected is not None:
            yield from projected


def _drop_none(values: Iterable[Optional[R]]) -> Iterator[R]:
    for value in values:
        if value is not None:
            yield value


def _validate_projection(
    source: Any,
    selector: Any,
    with_index: bool,
    selector_required: bool,
) -> None:
    require_not_none(source, "source")
    # with_index без selector не имеет смысла
    if selector is not None or selector_required or with_index:
        require_callable(selector, "selector")


def select_non_null(
    source: Iterable[Any],
    selector: Callable[..., Optional[R]] | None = None,
    *,
    with_index: bool = False,
) -> Iterator[R]:
    """
    Проекция элементов с отбрасыванием None.

    Без selector отбрасывает None из самого источника.
    С with_index=True selector вызывается как selector(item, index).

    Examples:
        >>> list(select_non_null([1, None, 2, None, 3]))
        [1, 2, 3]
        >>> list(select_non_null(["1", "x", "3"], lambda s: int(s) if s.isdigit() else None))
        [1, 3]
    """
    _validate_projection(source, selector, with_index, selector_required=False)
    return _drop_none(_project(source, selector, with_index))


def select_many_non_null(
    source: Iterable[Any],
    selector: Callable[..., Iterable[Optional[R]]],
    *,
    with_index: bool = False,
) -> Iterator[R]:
    """
    Проекция каждого элемента в последовательность, склейка и отбрасывание None.

    Проекция, вернувшая None вместо последовательности, пропускается.

    Examples:
        >>> list(select_many_non_null([[1, None], [], [2]], lambda xs: xs))
        [1, 2]
    """
    _validate_projection(source, selector, with_index, selector_required=True)
    return _drop_none(_project_many(source, selector, with_index))


def select_has_value(
    source: Iterable[Any],
    selector: Callable[..., Optional[R]] | None = None,
    *,
    with_index: bool = False,
) -> Iterator[R]:
    """
    Проекция Optional-значений с отбрасыванием отсутствующих (None).

    Optional в Python — это значение или None, поэтому семантика совпадает
    с select_non_null.
    """
    _validate_projection(source, selector, with_index, selector_required=False)
    return _drop_none(_project(source, selector, with_index))


def select_many_has_value(
    source: Iterable[Any],
    selector: Callable[..., Iterable[Optional[R]]],
    *,
    with_index: bool = False,
) -> Iterator[R]:
    """Склеивающая проекция Optional-значений с отбрасыванием None."""
    _validate_projection(source, selector, with_index, selector_required=True)
    return _drop_none(_project_many(source, selector, with_index))
