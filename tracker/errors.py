"""
Issue Tracker — Error Types

Decoders raise RowDecodeError. Query functions never raise for database
failures; they return a DbResult carrying a DbError instead.
"""

from __future__ import annotations


class RowDecodeError(ValueError):
    """A row is missing a named column or holds a value of the wrong shape."""

    def __init__(self, record: str, column: str | None, reason: str) -> None:
        self.record = record
        self.column = column
        self.reason = reason
        where = f"{record}.{column}" if column else record
        super().__init__(f"cannot decode {where}: {reason}")


class UnknownPriorityError(RowDecodeError):
    """Stored priority code outside 0-4."""

    def __init__(self, code: object) -> None:
        self.code = code
        super().__init__("Issue", "priority", f"unknown priority code {code!r}")


class DbError(Exception):
    """
    Failure of one query function.

    Wraps the underlying cause unchanged: a SQLAlchemy/driver error
    (connectivity, constraint violation, type mismatch), a RowDecodeError,
    or a TimeoutError. Callers decide whether it is recoverable.
    """

    def __init__(self, operation: str, cause: BaseException) -> None:
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation} failed: {type(cause).__name__}: {cause}")

    def __repr__(self) -> str:
        return f"<DbError operation={self.operation!r} cause={type(self.cause).__name__}>"
