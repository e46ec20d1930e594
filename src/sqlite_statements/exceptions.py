"""
Exception hierarchy for statement building and key extraction.

Every error raised by this package derives from StatementError and can be
turned into a structured dict for logging via to_dict().
"""

from typing import Any, Dict, Optional


class StatementError(Exception):
    """Base exception for all statement-building errors."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to structured dict for logging."""
        return {
            "error_type": type(self).__name__,
            "message": str(self),
        }


class InvalidArgumentError(StatementError, ValueError):
    """
    Raised when a caller-supplied value cannot be used.

    Covers null filter substitution values and unusable column names.

    Args:
        message: Error description
        index: Position of the offending filter argument (optional)
        column: Offending column name (optional)
    """

    def __init__(
        self,
        message: str,
        index: Optional[int] = None,
        column: Optional[Any] = None,
    ):
        self.index = index
        self.column = column
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        if self.index is not None:
            data["index"] = self.index
        if self.column is not None:
            data["column"] = repr(self.column)
        return data


class MalformedFilterError(StatementError, ValueError):
    """
    Raised when a filter expression and its arguments disagree.

    Args:
        expression: The filter expression that was being resolved
        expected: Number of ``?`` placeholders found in the expression
        actual: Number of substitution values supplied
    """

    def __init__(self, expression: str, expected: int, actual: int):
        self.expression = expression
        self.expected = expected
        self.actual = actual
        super().__init__(
            "bind or column index out of range: count of args does not match "
            f"count of placeholders (placeholders={expected}, args={actual})"
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update(
            {
                "expression": self.expression,
                "expected": self.expected,
                "actual": self.actual,
            }
        )
        return data


class DataAccessError(StatementError):
    """
    Raised when reading from or releasing a result cursor fails.

    Args:
        message: Error description
        original_error: The exception raised by the cursor
    """

    def __init__(self, message: str, original_error: BaseException):
        self.original_error = original_error
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.args[0]}: {type(self.original_error).__name__}: {self.original_error}"

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update(
            {
                "original_error_type": type(self.original_error).__name__,
                "original_error_message": str(self.original_error),
            }
        )
        return data
