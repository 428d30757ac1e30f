"""
Combinators that collect ALL errors instead of stopping at the first one.

Three strategies for reducing independent fallible results to either
"every value" or "every error, converted to one type":

- collect_partitioned: drain results, keep all values or all errors
- fail_all / fail_all_list: one converted error per input, or all values
- Bindings / bind2 / bind3: heterogeneous results, typed access on success

Architecture:
- Generic combinators (*M functions) work with any carrier via extract pattern
- Sugar functions for kungfu Result (no suffix)
- Sugar functions for WriterResult (*_w suffix), logs merged in input order
"""

# Core types
from ._types import Convert, Extract, Into, Partitioned

# Internal helpers (for custom carriers)
from . import _helpers

# Lift helpers
from . import lift
from .lift import catching, optional

# Writer carrier
from . import writer
from .writer import Log, WriterResult

# Collection operations
from .collection import (
    # Result
    collect_partitioned,
    fail_all,
    fail_all_list,
    # WriterResult
    collect_partitioned_w,
    fail_all_w,
    # Generic
    collect_partitionedM,
)

# Bindings
from .binding import (
    Binding,
    Bindings,
    EarlyReturn,
    returns_early,
    # Result
    bind2,
    bind3,
    # WriterResult
    bind2_w,
    # Generic
    bind2M,
)

# Errors
from ._errors import MultipleErrors, TraversalInvariantError, UnresolvedBindingError

__all__ = (
    # Types
    "Convert",
    "Extract",
    "Into",
    "Partitioned",
    # Internal helpers (for custom carriers)
    "_helpers",
    # Lift module (namespace import - preferred)
    "lift",
    "catching",
    "optional",
    # Writer module
    "writer",
    "Log",
    "WriterResult",
    # Collection - Result
    "collect_partitioned",
    "fail_all",
    "fail_all_list",
    # Collection - WriterResult
    "collect_partitioned_w",
    "fail_all_w",
    # Collection - Generic
    "collect_partitionedM",
    # Bindings
    "Binding",
    "Bindings",
    "EarlyReturn",
    "returns_early",
    "bind2",
    "bind3",
    "bind2_w",
    "bind2M",
    # Errors
    "MultipleErrors",
    "TraversalInvariantError",
    "UnresolvedBindingError",
)
