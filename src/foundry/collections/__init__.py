"""
Collection helpers

Null-safe поиск в словарях, пары ключ/значение, поиск экстремума
и ленивые проекции с фильтрацией None.
"""

from src.foundry.collections.mappings import (
    KeyValuePair,
    deconstruct,
    get_value_or_default,
    get_value_or_none,
    get_value_or_zero,
    iter_pairs,
)
from src.foundry.collections.sequences import (
    first_or_none,
    index_of_max,
    index_of_max_by,
    index_of_max_with,
    index_of_min,
    index_of_min_by,
    index_of_min_with,
    item_with_max,
    item_with_min,
    long_index_of_max,
    long_index_of_max_by,
    long_index_of_max_with,
    long_index_of_min,
    long_index_of_min_by,
    long_index_of_min_with,
    select_has_value,
    select_many_has_value,
    select_many_non_null,
    select_non_null,
)

__all__ = [
    # Mappings
    "KeyValuePair",
    "deconstruct",
    "get_value_or_default",
    "get_value_or_none",
    "get_value_or_zero",
    "iter_pairs",
    # Sequences — First
    "first_or_none",
    # Sequences — Extremum
    "index_of_max",
    "index_of_max_by",
    "index_of_max_with",
    "index_of_min",
    "index_of_min_by",
    "index_of_min_with",
    "long_index_of_max",
    "long_index_of_max_by",
    "long_index_of_max_with",
    "long_index_of_min",
    "long_index_of_min_by",
    "long_index_of_min_with",
    "item_with_max",
    "item_with_min",
    # Sequences — Projections
    "select_has_value",
    "select_many_has_value",
    "select_many_non_null",
    "select_non_null",
]
