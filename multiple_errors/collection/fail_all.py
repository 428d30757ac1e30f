"""Fail-all combinators

If at least one Result is an Error, turn all of them into errors. Else, unwrap them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import assert_never

from kungfu import Error, Ok, Result

from .._errors import TraversalInvariantError
from .._helpers import is_error, merge_writer_logs
from .._types import Convert
from ..writer import Log, WriterResult

def _unwrap_all[T, E](results: Iterable[Result[T, E]]) -> Iterator[T]:
    for index, r in enumerate(results):
        match r:
            case Ok(value):
                yield value
            case Error(_):
                raise TraversalInvariantError(index)
            case _ as unreachable:
                assert_never(unreachable)

# Sugar for Result (lazy)
def fail_all[T, E1, E2](
    results: Iterable[Result[T, E1]],
    convert: Convert[T, E1, E2],
) -> Result[Iterator[T], Iterator[E2]]:
    """
    If any element failed, convert EVERY element. Else, unwrap every element.

    **When to use:** You need positional errors: one output error per input,
    including a placeholder for positions that succeeded.

    `convert` receives the whole Result, so successes can map to a
    distinct placeholder error:

    Example:
        from multiple_errors import fail_all

        def to_error(r: Result[int, str]) -> str:
            match r:
                case Ok(_):
                    return "skipped"
                case Error(e):
                    return f"failed: {e}"

        match fail_all([Ok(1), Error("boom"), Ok(3)], to_error):
            case Error(errors):
                list(errors)  # ["skipped", "failed: boom", "skipped"]

    Both returned iterators are lazy: `convert` and unwrapping run only as
    the caller consumes them. `convert` is never called on the Ok branch.

    NOTE: The input is traversed twice (scan, then produce). A one-shot
          iterator is buffered into a tuple first; collections are re-read
          directly and must not be mutated in between. An Error met on the
          unwrap pass raises TraversalInvariantError.
    """
    if isinstance(results, Iterator):
        results = tuple(results)

    if any(is_error(r) for r in results):
        return Error(map(convert, results))
    return Ok(_unwrap_all(results))

# Sugar for Result (materialized)
def fail_all_list[T, E1, E2](
    results: Iterable[Result[T, E1]],
    convert: Convert[T, E1, E2],
) -> Result[list[T], list[E2]]:
    """
    fail_all, realized into lists on both branches.

    Example:
        fail_all_list([Ok(1), Ok(2)], to_error)          # Ok([1, 2])
        fail_all_list([Ok(1), Error(e)], placeholder_or)  # Error([P, W(e)])
    """
    match fail_all(results, convert):
        case Ok(values):
            return Ok(list(values))
        case Error(errors):
            return Error(list(errors))
        case _ as unreachable:
            assert_never(unreachable)

# Sugar for WriterResult
def fail_all_w[T, E1, E2, W](
    writer_results: Iterable[WriterResult[T, E1, Log[W]]],
    convert: Convert[T, E1, E2],
) -> WriterResult[list[T], list[E2], Log[W]]:
    """fail_all_list over WriterResults. Merges every input log, in order."""
    wrs = tuple(writer_results)
    merged = merge_writer_logs(wrs)
    return WriterResult(fail_all_list([wr.result for wr in wrs], convert), merged)

__all__ = ("fail_all", "fail_all_list", "fail_all_w")
