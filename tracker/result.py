"""Two-variant result returned by every query function."""

from __future__ import annotations

from typing import Generic, NamedTuple, TypeVar

from tracker.errors import DbError

T = TypeVar("T")


class DbResult(NamedTuple, Generic[T]):
    """
    Success value or DbError.

    For singular lookups a successful result may carry None: absence is a
    normal outcome, distinct from failure. Check `ok` (or `error`), never
    the truthiness of `value`.
    """
    value: T | None = None
    error: DbError | None = None

    @classmethod
    def success(cls, value: T | None = None) -> DbResult[T]:
        return cls(value=value, error=None)

    @classmethod
    def failure(cls, error: DbError) -> DbResult[T]:
        return cls(value=None, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T | None:
        """Return the value, or raise the carried DbError."""
        if self.error is not None:
            raise self.error
        return self.value
