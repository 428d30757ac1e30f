"""Internal helpers for multiple_errors.

Common functions used across multiple combinator modules.
These are not part of the public API but can be used with the generic *M combinators."""

from __future__ import annotations

from collections.abc import Iterable
from typing import assert_never

from kungfu import Error, Ok, Result

from .writer import Log, WriterResult

# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

# Inspection
def is_error[T, E](r: Result[T, E]) -> bool:
    """True for Error, False for Ok."""
    match r:
        case Error(_):
            return True
        case Ok(_):
            return False
        case _ as unreachable:
            assert_never(unreachable)

# Extract functions (Raw -> Result[T, E])
def extract_writer_result[T, E, W](wr: WriterResult[T, E, Log[W]]) -> Result[T, E]:
    """Extract Result from WriterResult, dropping the log."""
    return wr.result

# Log merging helpers
def merge_writer_logs[T, E, W](wrs: Iterable[WriterResult[T, E, Log[W]]]) -> Log[W]:
    """
    Extract and merge logs from multiple WriterResults.

    Convenience function for common pattern:
        merged_log = Log[W]()
        for wr in wrs:
            merged_log = merged_log.combine(wr.log)
    """
    return Log.concat(wr.log for wr in wrs)

def accumulate_writer_log[T, E, W](acc: Log[W], wr: WriterResult[T, E, Log[W]]) -> Log[W]:
    """Fold step for the *M combinators: append one WriterResult's log."""
    return acc.combine(wr.log)

def ignore_raw[Acc, Raw](acc: Acc, raw: Raw) -> Acc:
    """Fold step for plain Results: nothing to accumulate besides values."""
    _ = raw
    return acc

__all__ = (
    # Identity
    "identity",
    # Inspection
    "is_error",
    # Extract functions
    "extract_writer_result",
    # Log merging
    "merge_writer_logs",
    "accumulate_writer_log",
    "ignore_raw",
)
