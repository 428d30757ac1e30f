"""
Collect combinators
===================

Накопление всех ошибок: partition oks/errors with extract + fold pattern.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import assert_never

from kungfu import Error, Ok, Result

from .._helpers import accumulate_writer_log, extract_writer_result, identity, ignore_raw
from .._types import Extract, Partitioned
from ..writer import Log, WriterResult


# ============================================================================
# Generic combinator (extract + fold pattern)
# ============================================================================


def collect_partitionedM[T, E, Raw, Acc, Out](
    raws: Iterable[Raw],
    *,
    extract: Extract[Raw, T, E],
    initial: Acc,
    accumulate: Callable[[Acc, Raw], Acc],
    combine_ok: Callable[[list[T], Acc], Out],
    combine_err: Callable[[list[E], Acc], Out],
) -> Out:
    """
    Generic collect combinator. Collects ALL errors, never short-circuits.

    Every raw element is extracted and folded into `acc`, failures and
    successes alike, so the input is always drained. Success values stop
    being retained as soon as the first error is seen: they would be
    discarded anyway.
    """
    oks: list[T] = []
    errs: list[E] = []
    acc = initial

    for raw in raws:
        acc = accumulate(acc, raw)
        match extract(raw):
            case Error(err):
                errs.append(err)
            case Ok(value):
                if not errs:
                    oks.append(value)
            case _ as unreachable:
                assert_never(unreachable)

    if errs:
        return combine_err(errs, acc)
    return combine_ok(oks, acc)


# ============================================================================
# Sugar for Result
# ============================================================================


def collect_partitioned[T, E](results: Iterable[Result[T, E]]) -> Partitioned[T, E]:
    """
    Like `sequence` for Results, but keeps ALL errors instead of the first.

    **When to use:** You ran several independent validations and want
    either every value or every error.

    Example:
        from multiple_errors import collect_partitioned

        collect_partitioned([Error("a"), Ok(1), Error("b")])  # Error(["a", "b"])
        collect_partitioned([Ok(1), Ok(2)])                   # Ok([1, 2])
        collect_partitioned([])                               # Ok([])

    NOTE: The input is consumed exactly once and always to the end, so
          side effects of lazily produced elements all happen.
    """

    def combine_ok(oks: list[T], acc: None) -> Partitioned[T, E]:
        _ = acc
        return Ok(oks)

    def combine_err(errs: list[E], acc: None) -> Partitioned[T, E]:
        _ = acc
        return Error(errs)

    return collect_partitionedM(
        results,
        extract=identity,
        initial=None,
        accumulate=ignore_raw,
        combine_ok=combine_ok,
        combine_err=combine_err,
    )


# ============================================================================
# Sugar for WriterResult
# ============================================================================


def collect_partitioned_w[T, E, W](
    writer_results: Iterable[WriterResult[T, E, Log[W]]],
) -> WriterResult[list[T], list[E], Log[W]]:
    """Collect all values or all errors. Merges logs of every input, in order."""

    def combine_ok(oks: list[T], log: Log[W]) -> WriterResult[list[T], list[E], Log[W]]:
        return WriterResult(Ok(oks), log)

    def combine_err(errs: list[E], log: Log[W]) -> WriterResult[list[T], list[E], Log[W]]:
        return WriterResult(Error(errs), log)

    return collect_partitionedM(
        writer_results,
        extract=extract_writer_result,
        initial=Log[W](),
        accumulate=accumulate_writer_log,
        combine_ok=combine_ok,
        combine_err=combine_err,
    )


__all__ = ("collect_partitioned", "collect_partitioned_w", "collect_partitionedM")
