"""Statement builders and result helpers."""

from .builder import StatementBuilder
from .keys import NO_KEY, ResultCursor, fetch_generated_key
from .statements import build_delete, build_insert, build_update

__all__ = [
    "StatementBuilder",
    "build_insert",
    "build_update",
    "build_delete",
    "fetch_generated_key",
    "ResultCursor",
    "NO_KEY",
]
