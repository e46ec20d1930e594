"""SQL text paired with its positional bind values."""

from dataclasses import dataclass, field
from typing import Any, Iterator, Tuple


@dataclass(frozen=True)
class SQLStatement:
    """
    A SQL fragment or statement and the values bound to its ``?`` placeholders.

    Bindings are stored as a tuple in placeholder order. The object unpacks
    like a pair:

        >>> sql, bindings = SQLStatement("x=?", (1,))
        >>> bindings
        (1,)
    """

    sql: str
    bindings: Tuple[Any, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.bindings, tuple):
            object.__setattr__(self, "bindings", tuple(self.bindings))

    def __iter__(self) -> Iterator[Any]:
        yield self.sql
        yield self.bindings
