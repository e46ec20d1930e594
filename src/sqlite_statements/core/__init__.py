"""Core clause building utilities."""

from .clauses import DEFAULT_VALUES, build_assignments_clause, build_values_clause
from .conflict import ConflictPolicy
from .placeholders import build_where_clause, count_placeholders
from .statement import SQLStatement
from .values import ColumnValues, sorted_entries

__all__ = [
    "DEFAULT_VALUES",
    "build_values_clause",
    "build_assignments_clause",
    "build_where_clause",
    "count_placeholders",
    "ConflictPolicy",
    "SQLStatement",
    "ColumnValues",
    "sorted_entries",
]
