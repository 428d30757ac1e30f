"""
Fixed-arity binders
===================

Комбинаторы bind2/bind3 с extract + combine паттерном.

Typed shortcuts over Bindings for the common two- and three-expression cases:
heterogeneous values, heterogeneous errors, one aggregate error list.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import assert_never

from kungfu import Error, Ok, Result

from .._helpers import extract_writer_result, identity
from .._types import Extract, Into
from ..writer import Log, WriterResult
from .bindings import Bindings


# ============================================================================
# Generic combinator (extract + combine pattern)
# ============================================================================


def bind2M[A, B, E, EA, EB, RawA, RawB, Out](
    a: RawA,
    b: RawB,
    *,
    extract_a: Extract[RawA, A, EA],
    extract_b: Extract[RawB, B, EB],
    into_a: Into[EA, E],
    into_b: Into[EB, E],
    seed: Iterable[E],
    combine_ok: Callable[[A, B, RawA, RawB], Out],
    combine_err: Callable[[list[E], RawA, RawB], Out],
) -> Out:
    """Generic bind2 combinator."""
    bindings = Bindings[E](seed)
    bound_a = bindings.bind(extract_a(a), into_a)
    bound_b = bindings.bind(extract_b(b), into_b)

    match bindings.resolve():
        case Error(errors):
            return combine_err(errors, a, b)
        case Ok(_):
            return combine_ok(bound_a.value, bound_b.value, a, b)
        case _ as unreachable:
            assert_never(unreachable)


# ============================================================================
# Sugar for Result
# ============================================================================


def bind2[A, B, E, EA, EB](
    a: Result[A, EA],
    b: Result[B, EB],
    *,
    into_a: Into[EA, E] = identity,
    into_b: Into[EB, E] = identity,
    seed: Iterable[E] = (),
) -> Result[tuple[A, B], list[E]]:
    """
    Both values, or every error converted to E.

    Example:
        bind2(a(FAIL), b(FAIL), into_a=HighLevelErr.from_a, into_b=HighLevelErr.from_b)
        # Error([HighLevelErr.A(ErrA()), HighLevelErr.B(ErrB())])
    """

    def combine_ok(val_a: A, val_b: B, raw_a: Result[A, EA], raw_b: Result[B, EB]) -> Result[tuple[A, B], list[E]]:
        _ = (raw_a, raw_b)
        return Ok((val_a, val_b))

    def combine_err(errors: list[E], raw_a: Result[A, EA], raw_b: Result[B, EB]) -> Result[tuple[A, B], list[E]]:
        _ = (raw_a, raw_b)
        return Error(errors)

    return bind2M(
        a, b,
        extract_a=identity,
        extract_b=identity,
        into_a=into_a,
        into_b=into_b,
        seed=seed,
        combine_ok=combine_ok,
        combine_err=combine_err,
    )


def bind3[A, B, C, E, EA, EB, EC](
    a: Result[A, EA],
    b: Result[B, EB],
    c: Result[C, EC],
    *,
    into_a: Into[EA, E] = identity,
    into_b: Into[EB, E] = identity,
    into_c: Into[EC, E] = identity,
    seed: Iterable[E] = (),
) -> Result[tuple[A, B, C], list[E]]:
    """All three values, or every error converted to E."""
    bindings = Bindings[E](seed)
    bound_a = bindings.bind(a, into_a)
    bound_b = bindings.bind(b, into_b)
    bound_c = bindings.bind(c, into_c)

    match bindings.resolve():
        case Error(errors):
            return Error(errors)
        case Ok(_):
            return Ok((bound_a.value, bound_b.value, bound_c.value))
        case _ as unreachable:
            assert_never(unreachable)


# ============================================================================
# Sugar for WriterResult
# ============================================================================


def bind2_w[A, B, E, EA, EB, W](
    a: WriterResult[A, EA, Log[W]],
    b: WriterResult[B, EB, Log[W]],
    *,
    into_a: Into[EA, E] = identity,
    into_b: Into[EB, E] = identity,
    seed: Iterable[E] = (),
) -> WriterResult[tuple[A, B], list[E], Log[W]]:
    """bind2 over WriterResults. Both logs are merged on either branch."""

    def combine_ok(
        val_a: A, val_b: B,
        raw_a: WriterResult[A, EA, Log[W]],
        raw_b: WriterResult[B, EB, Log[W]],
    ) -> WriterResult[tuple[A, B], list[E], Log[W]]:
        return WriterResult(Ok((val_a, val_b)), raw_a.log.combine(raw_b.log))

    def combine_err(
        errors: list[E],
        raw_a: WriterResult[A, EA, Log[W]],
        raw_b: WriterResult[B, EB, Log[W]],
    ) -> WriterResult[tuple[A, B], list[E], Log[W]]:
        return WriterResult(Error(errors), raw_a.log.combine(raw_b.log))

    return bind2M(
        a, b,
        extract_a=extract_writer_result,
        extract_b=extract_writer_result,
        into_a=into_a,
        into_b=into_b,
        seed=seed,
        combine_ok=combine_ok,
        combine_err=combine_err,
    )


__all__ = ("bind2", "bind3", "bind2_w", "bind2M")
