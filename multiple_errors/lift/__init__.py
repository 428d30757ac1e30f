"""
Lift helpers with semantic namespaces.

Supports the same import styles everywhere:
    from multiple_errors import lift as L   # Recommended
    from multiple_errors import lift        # Explicit

Architecture:
- L.up.*    - подъем значений в Result
- L.down.*  - опускание Result в значение

Examples:
    from multiple_errors import lift as L

    name = L.up.optional(form.get("name"), error=lambda: Missing("name"))
    age = L.up.catching(lambda: int(form["age"]), on_error=BadAge)

    values = L.down.unwrap_or_raise(collect_partitioned([name, age]))
"""

from __future__ import annotations

from . import down, up

# Convenience: most common functions in root for easy access
from .down import or_else, unwrap_or_raise
from .up import catching, fail, ok, optional

__all__ = (
    # Namespaces (L.up.*, L.down.*)
    "up",
    "down",
    # Up
    "ok",
    "fail",
    "optional",
    "catching",
    # Down
    "unwrap_or_raise",
    "or_else",
)
