"""
Filter clause placeholder substitution.

Placeholders are found with a plain character scan: a ``?`` inside a quoted
string literal is counted like any other. Substituted values are wrapped in
single quotes without escaping, so they must already be safe to inline.
"""

from typing import Any, Optional, Sequence

from ..exceptions import InvalidArgumentError, MalformedFilterError

PLACEHOLDER = "?"


def count_placeholders(expression: str) -> int:
    """
    Count ``?`` characters in a filter expression.

    Examples:
        >>> count_placeholders("a=? AND b=?")
        2
    """
    return expression.count(PLACEHOLDER)


def build_where_clause(expression: str, args: Optional[Sequence[Any]]) -> str:
    """
    Inline filter arguments into a WHERE expression.

    Each ``?`` of the original expression is replaced, left to right, with
    the matching argument as a quoted literal. A ``?`` that appears inside a
    substituted value is left alone.

    Args:
        expression: SQL boolean expression containing ``?`` placeholders
        args: Substitution values, one per placeholder. None returns the
            expression unchanged.

    Returns:
        Expression with every placeholder replaced

    Raises:
        InvalidArgumentError: an argument is None
        MalformedFilterError: placeholder and argument counts differ

    Examples:
        >>> build_where_clause("a=? AND b=?", ["x", "y"])
        "a='x' AND b='y'"
    """
    if args is None:
        return expression

    for index, arg in enumerate(args):
        if arg is None:
            raise InvalidArgumentError(
                f"the bind value at index {index} is null", index=index
            )

    expected = count_placeholders(expression)
    if expected != len(args):
        raise MalformedFilterError(expression, expected=expected, actual=len(args))

    parts = expression.split(PLACEHOLDER)
    resolved = [parts[0]]
    for arg, tail in zip(args, parts[1:]):
        resolved.append(f"'{arg}'")
        resolved.append(tail)
    return "".join(resolved)
