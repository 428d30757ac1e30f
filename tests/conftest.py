"""Pytest configuration and shared placeholders.

Placeholder values, errors and fallible functions used across the suite:
success markers A/B/C, their errors ErrA/ErrB/ErrC, the aggregate
HighLevelErr every error converts into, and an Outcome switch that
decides whether a fallible function succeeds.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import assert_never

import pytest
from kungfu import Error, Ok, Result

# =============================================================================
# Outcome switch
# =============================================================================


class Outcome(Enum):
    FAIL = auto()
    SUCCEED = auto()


FAIL = Outcome.FAIL
SUCCEED = Outcome.SUCCEED

# =============================================================================
# Placeholders
# =============================================================================


@dataclass(frozen=True, slots=True)
class A:
    pass


@dataclass(frozen=True, slots=True)
class B:
    pass


@dataclass(frozen=True, slots=True)
class C:
    pass


@dataclass(frozen=True, slots=True)
class ErrA:
    pass


@dataclass(frozen=True, slots=True)
class ErrB:
    pass


@dataclass(frozen=True, slots=True)
class ErrC:
    pass


@dataclass(frozen=True, slots=True)
class HighLevelErr:
    """Aggregate error: wraps whichever low-level error it came from."""

    source: ErrA | ErrB | ErrC | None = None

    @classmethod
    def of(cls, source: ErrA | ErrB | ErrC) -> HighLevelErr:
        return cls(source)


PLACEHOLDER = HighLevelErr()


def a(outcome: Outcome) -> Result[A, ErrA]:
    return Ok(A()) if outcome is SUCCEED else Error(ErrA())


def b(outcome: Outcome) -> Result[B, ErrB]:
    return Ok(B()) if outcome is SUCCEED else Error(ErrB())


def c(outcome: Outcome) -> Result[C, ErrC]:
    return Ok(C()) if outcome is SUCCEED else Error(ErrC())


def placeholder_or_wrap(r: Result[A, ErrA]) -> HighLevelErr:
    """Successes become PLACEHOLDER, failures are wrapped."""
    match r:
        case Ok(_):
            return PLACEHOLDER
        case Error(err):
            return HighLevelErr.of(err)
        case _ as unreachable:
            assert_never(unreachable)


# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class CountingSource:
    """Yields the given Results lazily and records how many were pulled."""

    results: list[Result[object, object]]
    pulled: int = 0
    seen: list[int] = field(default_factory=list)

    def __iter__(self) -> Iterator[Result[object, object]]:
        for index, r in enumerate(self.results):
            self.pulled += 1
            self.seen.append(index)
            yield r


@dataclass
class RecordingConvert:
    """convert callback that records every Result it was called with."""

    calls: list[Result[A, ErrA]] = field(default_factory=list)

    def __call__(self, r: Result[A, ErrA]) -> HighLevelErr:
        self.calls.append(r)
        return placeholder_or_wrap(r)


@pytest.fixture
def recording_convert() -> RecordingConvert:
    return RecordingConvert()
