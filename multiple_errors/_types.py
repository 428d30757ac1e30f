"""
Core type definitions for multiple_errors.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Result

# ============================================================================
# Type aliases
# ============================================================================

# Into = total conversion from one error type into the aggregate error type
type Into[E1, E2] = Callable[[E1], E2]

# Convert = per-element conversion that sees the whole Result, not just the error
type Convert[T, E1, E2] = Callable[[Result[T, E1]], E2]

# Extract = pull a plain Result out of a carrier (WriterResult, custom wrappers)
type Extract[Raw, T, E] = Callable[[Raw], Result[T, E]]

# ============================================================================
# Concrete type shortcuts
# ============================================================================

# Partitioned = every value or every error, never both
type Partitioned[T, E] = Result[list[T], list[E]]

__all__ = (
    "Into",
    "Convert",
    "Extract",
    "Partitioned",
)
