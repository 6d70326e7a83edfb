# engine/exceptions.py

from __future__ import annotations

from typing import Any, Optional


class ResponseParseError(ValueError):
    pass


class MalformedScalar(ResponseParseError):
    def __init__(
        self,
        raw: Any,
        reason: str = "not a decimal number or null",
        row_name: Optional[str] = None,
        value_index: Optional[int] = None,
        column_index: Optional[int] = None,
    ):
        self.raw = raw
        self.reason = reason
        self.row_name = row_name
        self.value_index = value_index
        self.column_index = column_index
        where = ""
        if row_name is not None:
            where += f" in row {row_name!r}"
        if value_index is not None:
            where += f" at value {value_index}"
        if column_index is not None:
            where += f", column {column_index}"
        super().__init__(f"malformed scalar {raw!r}{where}: {reason}")


class StructuralMismatch(ResponseParseError):
    def __init__(
        self,
        row_name: str,
        expected: int,
        actual: int,
        value_index: Optional[int] = None,
    ):
        self.row_name = row_name
        self.expected = expected
        self.actual = actual
        self.value_index = value_index
        if value_index is None:
            detail = f"row {row_name!r} has {actual} column(s), expected at least {expected}"
        else:
            detail = (
                f"row {row_name!r} value {value_index} has {actual} scalar(s), "
                f"expected {expected} to match columns"
            )
        super().__init__(detail)
