from __future__ import annotations

import typing


class TraversalInvariantError(AssertionError):
    """fail_all found an Error on the unwrap pass after the scan reported none."""

    index: int

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(
            f"Element {index} is an Error on the unwrap pass; "
            "the input was mutated between traversals"
        )


class UnresolvedBindingError(LookupError):
    """Binding.value was read before its Bindings resolved to Ok."""

    position: int

    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(f"Binding #{position} is not resolved: call resolve() and handle errors first")


class MultipleErrors[E](Exception):
    """One or more errors collected together, raised as a single exception."""

    errors: list[E]

    def __init__(self, errors: typing.Iterable[E]) -> None:
        self.errors = list(errors)
        super().__init__(f"{len(self.errors)} error(s): {self.errors!r}")


__all__ = ("MultipleErrors", "TraversalInvariantError", "UnresolvedBindingError")
