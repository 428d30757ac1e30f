"""
WriterResult - Result with accumulated log
==========================================
"""

from __future__ import annotations

import typing

from kungfu import Error, Ok, Result

from .log import Log


class WriterResult[T, E, W]:
    """
    Result with accumulated writer log.

    Combines:
    - Result[T, E]: outcome of one fallible computation
    - W: the log it produced (usually Log[...])

    This is the input and output carrier of the *_w combinators.
    """

    __slots__ = ("_result", "_log")
    __match_args__ = ("result", "log")

    def __init__(self, result: Result[T, E], log: W) -> None:
        self._result = result
        self._log = log

    @staticmethod
    def ok[V, LogT](value: V, *entries: LogT) -> WriterResult[V, typing.Never, Log[LogT]]:
        """Successful WriterResult with optional log entries."""
        return WriterResult(Ok(value), Log.of(*entries))

    @staticmethod
    def error[Err, LogT](error: Err, *entries: LogT) -> WriterResult[typing.Never, Err, Log[LogT]]:
        """Failed WriterResult with optional log entries."""
        return WriterResult(Error(error), Log.of(*entries))

    @property
    def result(self) -> Result[T, E]:
        """The underlying Result."""
        return self._result

    @property
    def log(self) -> W:
        """The accumulated log."""
        return self._log

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WriterResult):
            return NotImplemented
        return self._log == other._log and self._result == other._result

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"WriterResult({self._result!r}, log={self._log!r})"


__all__ = ("WriterResult",)
