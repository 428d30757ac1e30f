"""
Подъем значений в Result.

Функции для преобразования обычных значений, Optional и exception-based
кода в Result, готовый для collect_partitioned / fail_all / Bindings.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Never

from kungfu import Error, Ok, Result


def ok[T](value: T) -> Result[T, Never]:
    """
    Lift plain value into an always-successful Result.

    Example:
        from multiple_errors import lift as L

        L.up.ok(42)  # Ok(42)
    """
    return Ok(value)


def fail[E](error: E) -> Result[Never, E]:
    """
    Create a failed Result. Dual of ok().

    NOTE: Return type Result[Never, E] means "never produces a value".
    """
    return Error(error)


def optional[T, E](
    value: T | None,
    *,
    error: Callable[[], E],
) -> Result[T, E]:
    """
    Convert Optional to Result. None becomes Error(error()).

    **When to use:** Lookups that return None for "missing" and need to
    take part in error collection.

    Example:
        from multiple_errors import lift as L

        errors.bind(L.up.optional(form.get("email"), error=lambda: Missing("email")))

    NOTE: error is a thunk so the error is only built when value is None.
    """
    if value is None:
        return Error(error())
    return Ok(value)


def catching[T, E](
    thunk: Callable[[], T],
    *,
    on_error: Callable[[Exception], E],
) -> Result[T, E]:
    """
    Run thunk, catch exceptions and convert them to Error.

    **When to use:** Bridge between exception-based code (int(), json.loads,
    third-party parsers) and error collection.

    Example:
        from multiple_errors import lift as L

        age = L.up.catching(lambda: int(raw_age), on_error=lambda e: BadAge(str(e)))

    NOTE: Catches Exception subclasses only; KeyboardInterrupt, SystemExit
          and EarlyReturn pass through.
    """
    try:
        return Ok(thunk())
    except Exception as exc:
        return Error(on_error(exc))


__all__ = (
    "ok",
    "fail",
    "optional",
    "catching",
)
