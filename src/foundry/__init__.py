"""
Foundry helpers: numeric primitives, collection and text utilities.

Каждый helper — чистая функция без состояния. Общее состояние пакета
ограничено read-only таблицами глифов для цифр.
"""
