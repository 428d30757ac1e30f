"""
Bindings
========

Builder for a fixed set of independently fallible expressions with
heterogeneous value and error types.

Every expression is evaluated (by Python, at the `bind()` call) and every
result is inspected before any control-flow decision, so a failing first
binding never hides a failing third one.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable
from typing import assert_never

from kungfu import Error, Ok, Result

from .._errors import MultipleErrors, UnresolvedBindingError
from .._helpers import identity
from .._types import Into
from .early import EarlyReturn


class Binding[T]:
    """
    Handle to one bound Result.

    `value` is the unwrapped success value, readable only after the owning
    Bindings resolved to Ok. This is the stand-in for rebinding the name in
    place: `name = errors.bind(...)`, later `name.value`.
    """

    __slots__ = ("_owner", "_position", "_result")

    def __init__(self, owner: Bindings[typing.Any], position: int, result: Result[T, typing.Any]) -> None:
        self._owner = owner
        self._position = position
        self._result = result

    @property
    def position(self) -> int:
        """Declaration index within the owning Bindings."""
        return self._position

    @property
    def result(self) -> Result[T, typing.Any]:
        """The bound Result as given."""
        return self._result

    @property
    def value(self) -> T:
        """Unwrapped value. Raises UnresolvedBindingError until resolved to Ok."""
        if not self._owner.resolved:
            raise UnresolvedBindingError(self._position)
        match self._result:
            case Ok(value):
                return value
            case _:
                raise UnresolvedBindingError(self._position)

    def __repr__(self) -> str:
        return f"Binding(#{self._position}, {self._result!r})"


class Bindings[E]:
    """
    Accumulates fallible results and branches once on whether all succeeded.

    - seed: errors already known before binding (copied, never mutated)
    - bind(result, into): register one Result; `into` converts its error
      into the aggregate error type E
    - resolve(): Ok(values) or Error(seed + converted errors)
    - or_return(action) / or_raise(action): divergent actions on failure

    Example:
        errors = Bindings[HighLevelErr]()
        a = errors.bind(action_a(), HighLevelErr.from_a)
        b = errors.bind(action_b(), HighLevelErr.from_b)
        errors.or_raise()
        use(a.value, b.value)
    """

    __slots__ = ("_seed", "_entries", "_resolved")

    def __init__(self, seed: Iterable[E] = (), /) -> None:
        self._seed: list[E] = list(seed)
        self._entries: list[tuple[Binding[typing.Any], Callable[[typing.Any], E]]] = []
        self._resolved = False

    @property
    def resolved(self) -> bool:
        """True once resolve() found every binding Ok, until the next bind()."""
        return self._resolved

    def __len__(self) -> int:
        return len(self._entries)

    def bind[T, F](self, result: Result[T, F], into: Into[F, E] = identity, /) -> Binding[T]:
        """Register one Result. Returns its handle."""
        binding = Binding(self, len(self._entries), result)
        self._entries.append((binding, into))
        self._resolved = False
        return binding

    def resolve(self) -> Result[tuple[typing.Any, ...], list[E]]:
        """
        Inspect every binding, in declaration order.

        Ok(values) if all succeeded, the seed is then ignored.
        Error(seed + [into(e) for each failing binding]) otherwise.
        """
        values: list[typing.Any] = []
        errors: list[E] = list(self._seed)
        failed = False

        for binding, into in self._entries:
            match binding.result:
                case Ok(value):
                    values.append(value)
                case Error(err):
                    failed = True
                    errors.append(into(err))
                case _ as unreachable:
                    assert_never(unreachable)

        self._resolved = not failed
        if failed:
            return Error(errors)
        return Ok(tuple(values))

    def or_return[R](self, action: Callable[[list[E]], R], /) -> None:
        """
        On failure, return `action(errors)` from the nearest @returns_early function.

        On success this is a no-op and every Binding.value becomes readable.
        """
        match self.resolve():
            case Error(errors):
                raise EarlyReturn(action(errors))
            case Ok(_):
                return
            case _ as unreachable:
                assert_never(unreachable)

    def or_raise(
        self,
        action: Callable[[list[E]], BaseException] = MultipleErrors,
        /,
    ) -> None:
        """On failure, raise `action(errors)` (MultipleErrors by default)."""
        match self.resolve():
            case Error(errors):
                raise action(errors)
            case Ok(_):
                return
            case _ as unreachable:
                assert_never(unreachable)

    def __repr__(self) -> str:
        return f"Bindings(seed={self._seed!r}, bound={len(self._entries)}, resolved={self._resolved})"


__all__ = ("Binding", "Bindings")
