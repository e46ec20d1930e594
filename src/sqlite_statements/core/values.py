"""
Column/value containers.

Builders accept any ``Mapping[str, Any]``. ColumnValues is a dict-backed
mapping with a put-style API; both are read through sorted_entries(), which
fixes the column order used for both the SQL text and its bindings.
"""

from typing import Any, Dict, Iterator, List, Mapping, MutableMapping, Optional, Tuple

from ..exceptions import InvalidArgumentError


def _check_column(column: Any) -> str:
    if not isinstance(column, str) or not column:
        raise InvalidArgumentError(
            f"column name must be a non-empty string, got {column!r}", column=column
        )
    return column


def sorted_entries(values: Optional[Mapping[str, Any]]) -> List[Tuple[str, Any]]:
    """
    Return the column/value pairs of a mapping ordered by column name.

    Ordering is a plain code point comparison, independent of locale.
    A missing mapping is treated as empty.

    Examples:
        >>> sorted_entries({"b": 2, "a": 1})
        [('a', 1), ('b', 2)]
    """
    if not values:
        return []
    return sorted(
        ((_check_column(column), value) for column, value in values.items()),
        key=lambda entry: entry[0],
    )


class ColumnValues(MutableMapping[str, Any]):
    """
    Ordered column name to value map.

    Keys are unique and a repeated put overwrites the previous value.
    Iteration is always in column name order, regardless of insertion order.

    Example:
        >>> values = ColumnValues(name="Rex")
        >>> values.put("age", 3)
        >>> values.columns()
        ['age', 'name']
    """

    def __init__(self, initial: Optional[Mapping[str, Any]] = None, **kwargs: Any):
        self._data: Dict[str, Any] = {}
        if initial:
            self.put_all(initial)
        if kwargs:
            self.put_all(kwargs)

    def put(self, column: str, value: Any) -> None:
        """Set a column value, replacing any previous value."""
        self._data[_check_column(column)] = value

    def put_null(self, column: str) -> None:
        """Set a column to SQL NULL."""
        self.put(column, None)

    def put_all(self, other: Mapping[str, Any]) -> None:
        for column, value in other.items():
            self.put(column, value)

    def columns(self) -> List[str]:
        return sorted(self._data)

    def sorted_items(self) -> List[Tuple[str, Any]]:
        return sorted_entries(self._data)

    def __getitem__(self, column: str) -> Any:
        return self._data[column]

    def __setitem__(self, column: str, value: Any) -> None:
        self.put(column, value)

    def __delitem__(self, column: str) -> None:
        del self._data[column]

    def __iter__(self) -> Iterator[str]:
        return iter(self.columns())

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        inner = ", ".join(f"{column}={value!r}" for column, value in self.sorted_items())
        return f"ColumnValues({inner})"
