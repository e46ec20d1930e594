"""
Conflict resolution policies for INSERT statements.

The integer values match the CONFLICT_* constants used by SQLite wrappers,
so callers holding a raw code can convert it with ``ConflictPolicy(code)``.
An unknown code raises ValueError from the enum lookup.
"""

from enum import IntEnum
from typing import Union


class ConflictPolicy(IntEnum):
    """Closed set of ``INSERT OR ...`` resolution strategies."""

    NONE = 0
    ROLLBACK = 1
    ABORT = 2
    FAIL = 3
    IGNORE = 4
    REPLACE = 5

    @property
    def fragment(self) -> str:
        """SQL keyword fragment placed between ``INSERT`` and ``INTO``."""
        return _FRAGMENTS[self]

    @classmethod
    def coerce(cls, value: Union["ConflictPolicy", int, str]) -> "ConflictPolicy":
        """
        Resolve a policy from a member, an integer code or a member name.

        Examples:
            >>> ConflictPolicy.coerce(5)
            <ConflictPolicy.REPLACE: 5>
            >>> ConflictPolicy.coerce("ignore")
            <ConflictPolicy.IGNORE: 4>
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().upper()
            if name.isdigit():
                return cls(int(name))
            try:
                return cls[name]
            except KeyError:
                raise ValueError(f"{value!r} is not a valid {cls.__name__}") from None
        return cls(value)


_FRAGMENTS = {
    ConflictPolicy.NONE: "",
    ConflictPolicy.ROLLBACK: "OR ROLLBACK ",
    ConflictPolicy.ABORT: "OR ABORT ",
    ConflictPolicy.FAIL: "OR FAIL ",
    ConflictPolicy.IGNORE: "OR IGNORE ",
    ConflictPolicy.REPLACE: "OR REPLACE ",
}
