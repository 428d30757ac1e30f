from .bindings import Binding, Bindings
from .early import EarlyReturn, returns_early
from .fixed import bind2, bind2_w, bind2M, bind3

__all__ = (
    # Builder
    "Binding",
    "Bindings",
    # Divergence
    "EarlyReturn",
    "returns_early",
    # Result
    "bind2",
    "bind3",
    # WriterResult
    "bind2_w",
    # Generic
    "bind2M",
)
