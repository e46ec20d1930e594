"""
High-level statement builder bound to a single table.
"""

from typing import Any, Mapping, Optional, Sequence, Union

from sqlite_statements.config import Settings, get_settings
from sqlite_statements.core.conflict import ConflictPolicy
from sqlite_statements.core.statement import SQLStatement

from .statements import build_delete, build_insert, build_update


class StatementBuilder:
    """
    Builder for the INSERT, UPDATE and DELETE statements of one table.

    Example:
        >>> from sqlite_statements import StatementBuilder
        >>> pets = StatementBuilder("pets")
        >>> pets.insert({"name": "Rex", "age": 3}).sql
        'INSERT INTO pets (age, name) VALUES (?, ?);'
        >>> pets.delete("id=?", [4])
        "DELETE FROM pets WHERE id='4';"
    """

    def __init__(self, table: str, settings: Optional[Settings] = None):
        """
        Initialize the StatementBuilder.

        Args:
            table: Table name used by every statement
            settings: Settings providing the default conflict policy;
                the cached application settings when omitted
        """
        self.table = table
        self.settings = settings or get_settings()

    def insert(
        self,
        values: Optional[Mapping[str, Any]],
        conflict: Optional[Union[ConflictPolicy, int]] = None,
    ) -> SQLStatement:
        """
        Build an INSERT, falling back to the configured default conflict policy.
        """
        if conflict is None:
            conflict = self.settings.default_conflict
        return build_insert(self.table, values, conflict)

    def update(
        self,
        values: Optional[Mapping[str, Any]],
        where: Optional[str] = None,
        where_args: Optional[Sequence[Any]] = None,
    ) -> SQLStatement:
        return build_update(self.table, values, where, where_args)

    def delete(
        self,
        where: Optional[str] = None,
        where_args: Optional[Sequence[Any]] = None,
    ) -> str:
        return build_delete(self.table, where, where_args)

    def __repr__(self) -> str:
        return f"StatementBuilder(table={self.table!r})"
