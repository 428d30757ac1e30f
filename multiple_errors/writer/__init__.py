"""
Writer carrier
==============

WriterResult - Result плюс накопленный лог:
- Result[T, E] (успех/ошибка)
- Log[W] (аккумуляция логов)

The *_w combinators take WriterResults and merge every input log,
so diagnostics survive aggregation on both branches.
"""

from .log import Log
from .result import WriterResult

__all__ = (
    "Log",
    "WriterResult",
)
