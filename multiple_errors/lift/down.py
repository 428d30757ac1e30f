"""
Опускание Result в значение.

Функции для извлечения значений из агрегированных Result.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import assert_never

from kungfu import Error, Ok, Result

from .._errors import MultipleErrors


def unwrap_or_raise[T, E](result: Result[T, Iterable[E]]) -> T:
    """
    Return the value, or raise MultipleErrors with every collected error.

    **When to use:** At the boundary to exception-based code, after
    collect_partitioned / fail_all_list / bind2 produced an error list.

    Example:
        from multiple_errors import collect_partitioned, lift as L

        values = L.down.unwrap_or_raise(collect_partitioned(results))
    """
    match result:
        case Ok(value):
            return value
        case Error(errors):
            raise MultipleErrors(errors)
        case _ as unreachable:
            assert_never(unreachable)


def or_else[T, E](result: Result[T, E], default: T) -> T:
    """Return the value or default."""
    match result:
        case Ok(value):
            return value
        case Error(_):
            return default
        case _ as unreachable:
            assert_never(unreachable)


__all__ = (
    "unwrap_or_raise",
    "or_else",
)
