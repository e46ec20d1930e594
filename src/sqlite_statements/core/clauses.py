"""
Column clause builders shared by INSERT and UPDATE statements.

Both builders walk the entries in column name order and append each value to
the bindings in that same pass, so placeholder positions always line up with
the returned bindings.
"""

from typing import Any, Mapping, Optional

from .statement import SQLStatement
from .values import sorted_entries

DEFAULT_VALUES = "DEFAULT VALUES"


def build_values_clause(values: Optional[Mapping[str, Any]]) -> SQLStatement:
    """
    Build the ``(columns...) VALUES (?, ...)`` clause of an INSERT.

    Args:
        values: Column name/value pairs

    Returns:
        SQLStatement with the clause text and values in column order

    Examples:
        >>> build_values_clause({"name": "Rex", "age": 3})
        SQLStatement(sql='(age, name) VALUES (?, ?)', bindings=(3, 'Rex'))
        >>> build_values_clause({})
        SQLStatement(sql='DEFAULT VALUES', bindings=())
    """
    entries = sorted_entries(values)
    if not entries:
        return SQLStatement(DEFAULT_VALUES, ())

    columns = ", ".join(column for column, _ in entries)
    placeholders = ", ".join("?" for _ in entries)
    return SQLStatement(
        f"({columns}) VALUES ({placeholders})",
        tuple(value for _, value in entries),
    )


def build_assignments_clause(values: Optional[Mapping[str, Any]]) -> SQLStatement:
    """
    Build the ``col1=?, col2=?`` clause of an UPDATE.

    An empty mapping yields an empty clause; the database rejects the
    resulting statement.

    Examples:
        >>> build_assignments_clause({"b": 2, "a": 1})
        SQLStatement(sql='a=?, b=?', bindings=(1, 2))
    """
    entries = sorted_entries(values)
    return SQLStatement(
        ", ".join(f"{column}=?" for column, _ in entries),
        tuple(value for _, value in entries),
    )
