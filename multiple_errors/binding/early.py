"""
Early return
============

Возврат из функции изнутри вложенного вызова.

`Bindings.or_return(action)` raises EarlyReturn carrying `action(errors)`;
the nearest `@returns_early` function catches it and returns that value.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps


class EarlyReturn[R](BaseException):
    """
    Control signal: return `value` from the nearest @returns_early function.

    NOTE: Derives from BaseException so `except Exception` blocks between the
          raise site and the decorated function let it through. Escaping an
          undecorated function is a usage error and surfaces as a crash.
    """

    value: R

    def __init__(self, value: R) -> None:
        self.value = value
        super().__init__("or_return() used outside a @returns_early function")


def returns_early[R, **P](func: Callable[P, R]) -> Callable[P, R]:
    """
    Decorator that turns an EarlyReturn raised inside `func` into its return value.

    **When to use:** Together with `Bindings.or_return()`, to leave the
    function with the collected errors as soon as the bindings are checked.

    Example:
        from multiple_errors import Bindings, returns_early

        @returns_early
        def register(form: Form) -> Result[Account, list[FormError]]:
            errors = Bindings[FormError]()
            name = errors.bind(parse_name(form.name), FormError.name)
            age = errors.bind(parse_age(form.age), FormError.age)
            errors.or_return(Error)
            return Ok(Account(name.value, age.value))
    """

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except EarlyReturn as signal:
            return signal.value

    return wrapper


__all__ = ("EarlyReturn", "returns_early")
