"""
sqlite-statements - parameterized SQL for column/value writes.

Builds INSERT, UPDATE and DELETE statements from column/value mappings with
deterministic column order, inlines WHERE arguments, and reads generated keys
back from result cursors.
"""

from .core import (
    ColumnValues,
    ConflictPolicy,
    SQLStatement,
    build_assignments_clause,
    build_values_clause,
    build_where_clause,
    count_placeholders,
)
from .exceptions import (
    DataAccessError,
    InvalidArgumentError,
    MalformedFilterError,
    StatementError,
)
from .operations import (
    NO_KEY,
    StatementBuilder,
    build_delete,
    build_insert,
    build_update,
    fetch_generated_key,
)
from .utils.logging import configure_logging

__version__ = "0.1.0"

__all__ = [
    "ColumnValues",
    "ConflictPolicy",
    "SQLStatement",
    "build_values_clause",
    "build_assignments_clause",
    "build_where_clause",
    "count_placeholders",
    "StatementBuilder",
    "build_insert",
    "build_update",
    "build_delete",
    "fetch_generated_key",
    "NO_KEY",
    "configure_logging",
    "StatementError",
    "InvalidArgumentError",
    "MalformedFilterError",
    "DataAccessError",
]
