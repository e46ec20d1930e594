"""
Generated key extraction.

Works with any cursor exposing ``fetchone()`` and ``close()``: DB-API 2.0
cursors such as ``sqlite3.Cursor`` and SQLAlchemy ``CursorResult`` objects.
"""

from typing import Any, Optional, Protocol, Sequence

from sqlite_statements.exceptions import DataAccessError
from sqlite_statements.utils.logging import get_logger

logger = get_logger(__name__)

NO_KEY = -1


class ResultCursor(Protocol):
    """Protocol for the cursors fetch_generated_key reads from."""

    def fetchone(self) -> Optional[Sequence[Any]]: ...
    def close(self) -> None: ...


def fetch_generated_key(cursor: ResultCursor) -> int:
    """
    Read a generated key from ``cursor`` and close it.

    The cursor is closed exactly once, whether or not reading succeeds.

    Args:
        cursor: Result of a key-producing query, e.g.
            ``SELECT last_insert_rowid()`` or ``INSERT ... RETURNING id``

    Returns:
        First column of the first row as an int (0 when it is NULL),
        or -1 when there is no row

    Raises:
        DataAccessError: reading the row or closing the cursor failed
    """
    try:
        try:
            row = cursor.fetchone()
            if row is None:
                key = NO_KEY
            else:
                # SQL NULL reads as 0
                key = 0 if row[0] is None else int(row[0])
        finally:
            cursor.close()
    except Exception as exc:
        # A close failure replaces a read failure; the read error stays on __context__
        logger.warning(
            "generated_key_fetch_failed",
            error_type=type(exc).__name__,
            error=str(exc),
        )
        raise DataAccessError("failed to fetch generated key", original_error=exc) from exc

    return key
