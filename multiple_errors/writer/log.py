"""
Log - Моноидный аккумулятор для Writer
======================================
"""

from __future__ import annotations

from collections.abc import Iterable


class Log[A](list[A]):
    """
    Log accumulator carried next to a Result.

    A list with monoidal operations:
    - empty: Log()
    - combine: concatenation, never mutates either side

    Aggregating combinators (collect_partitioned_w, fail_all_w, bind2_w)
    combine the logs of every input in input order, on both branches.
    """

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        """Create log with items."""
        return Log[T](items)

    @staticmethod
    def concat[T](logs: Iterable[Log[T]]) -> Log[T]:
        """
        Fold many logs into one, left to right.

        Example:
            Log.concat([Log.of("a"), Log(), Log.of("b")])  # Log(["a", "b"])
        """
        merged: Log[T] = Log()
        for log in logs:
            merged.extend(log)
        return merged

    def combine(self, other: Log[A], /) -> Log[A]:
        """
        Combine two logs (monoidal append).

        Example:
            Log.of("a", "b").combine(Log.of("c"))  # Log(["a", "b", "c"])
        """
        result: Log[A] = Log(self)
        result.extend(other)
        return result

    def tell(self, item: A, /) -> Log[A]:
        """Append single item, returning a new log."""
        result: Log[A] = Log(self)
        result.append(item)
        return result


__all__ = ("Log",)
