"""
INSERT, UPDATE and DELETE statement builders.

Column values become positional bindings. WHERE arguments are inlined as
quoted literals by build_where_clause and never appear in the bindings.
"""

from typing import Any, Mapping, Optional, Sequence, Union

from pydantic import ValidationError

from sqlite_statements.config import get_settings
from sqlite_statements.core.clauses import build_assignments_clause, build_values_clause
from sqlite_statements.core.conflict import ConflictPolicy
from sqlite_statements.core.placeholders import build_where_clause
from sqlite_statements.core.statement import SQLStatement
from sqlite_statements.utils.logging import get_logger

logger = get_logger(__name__)


def _log_sql_enabled() -> bool:
    try:
        return get_settings().log_sql
    except ValidationError:
        # Builders stay usable when unrelated settings fail validation
        return False


def _log_built(kind: str, table: str, sql: str, binding_count: int) -> None:
    event = {"kind": kind, "table": table, "binding_count": binding_count}
    if _log_sql_enabled():
        event["sql"] = sql
    logger.debug("statement_built", **event)


def _where_suffix(where: Optional[str], where_args: Optional[Sequence[Any]]) -> str:
    if where is None:
        return ""
    return " WHERE " + build_where_clause(where, where_args)


def build_insert(
    table: str,
    values: Optional[Mapping[str, Any]],
    conflict: Union[ConflictPolicy, int] = ConflictPolicy.NONE,
) -> SQLStatement:
    """
    Build an INSERT statement.

    Args:
        table: Table name, emitted as given
        values: Column name/value pairs; empty inserts DEFAULT VALUES
        conflict: Conflict policy member or its integer code

    Returns:
        SQLStatement whose bindings follow column name order

    Raises:
        ValueError: conflict is not a known policy code

    Examples:
        >>> build_insert("t", {"b": 2, "a": 1})
        SQLStatement(sql='INSERT INTO t (a, b) VALUES (?, ?);', bindings=(1, 2))
        >>> build_insert("t", {}, ConflictPolicy.REPLACE).sql
        'INSERT OR REPLACE INTO t DEFAULT VALUES;'
    """
    policy = ConflictPolicy.coerce(conflict)
    clause = build_values_clause(values)
    sql = f"INSERT {policy.fragment}INTO {table} {clause.sql};"

    _log_built("insert", table, sql, len(clause.bindings))
    return SQLStatement(sql, clause.bindings)


def build_update(
    table: str,
    values: Optional[Mapping[str, Any]],
    where: Optional[str] = None,
    where_args: Optional[Sequence[Any]] = None,
) -> SQLStatement:
    """
    Build an UPDATE statement.

    Args:
        table: Table name, emitted as given
        values: Column name/value pairs to assign
        where: Optional filter expression with ``?`` placeholders
        where_args: Values inlined into ``where``, one per placeholder

    Returns:
        SQLStatement bound with the assigned values only

    Raises:
        InvalidArgumentError: a where argument is None
        MalformedFilterError: placeholder and argument counts differ

    Examples:
        >>> build_update("t", {"x": 1}, "id=?", ["5"])
        SQLStatement(sql="UPDATE t SET x=? WHERE id='5';", bindings=(1,))
    """
    clause = build_assignments_clause(values)
    sql = f"UPDATE {table} SET {clause.sql}{_where_suffix(where, where_args)};"

    _log_built("update", table, sql, len(clause.bindings))
    return SQLStatement(sql, clause.bindings)


def build_delete(
    table: str,
    where: Optional[str] = None,
    where_args: Optional[Sequence[Any]] = None,
) -> str:
    """
    Build a DELETE statement.

    All filter values are inlined, so only the SQL text is returned.

    Examples:
        >>> build_delete("t", "id=?", [7])
        "DELETE FROM t WHERE id='7';"
        >>> build_delete("t")
        'DELETE FROM t;'
    """
    sql = f"DELETE FROM {table}{_where_suffix(where, where_args)};"

    _log_built("delete", table, sql, 0)
    return sql
