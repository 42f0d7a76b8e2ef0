"""
Issue Tracker — Domain Records & Row Decoders

User and Issue are immutable value records. Each has a `read` decoder that
builds the record from one database row by column name. Records never hold
references back to the connection or the row they came from.
"""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, Field, Strict, StrictBool, StrictStr, ValidationError

from tracker.config import Ordering, Priority
from tracker.errors import RowDecodeError

USER_COLUMNS: tuple[str, ...] = (
    "id",
    "username",
    "email_address",
    "gravatar_email_address",
    "account_verified",
    "password_hash",
    "biography",
)

ISSUE_COLUMNS: tuple[str, ...] = (
    "id",
    "title",
    "description",
    "author_id",
    "assigned_user_id",
    "priority",
    "created_at",
    "updated_at",
    "is_closed",
)


def _as_utc(value: datetime) -> datetime:
    """Naive timestamps are taken to be UTC; aware ones are converted to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# SQLite returns timestamps without an offset and PostgreSQL returns them
# aware, so records always hold aware UTC values.
UtcDatetime = Annotated[datetime, Strict(), AfterValidator(_as_utc)]


def _row_mapping(row: Any) -> Mapping[str, Any]:
    """Accept a SQLAlchemy Row or any mapping keyed by column name."""
    return getattr(row, "_mapping", row)


def _read_columns(row: Any, record: str, columns: tuple[str, ...]) -> dict[str, Any]:
    data = _row_mapping(row)
    values: dict[str, Any] = {}
    for column in columns:
        try:
            values[column] = data[column]
        except KeyError:
            raise RowDecodeError(record, column, "column missing from row") from None
    return values


def _validate(model: type[BaseModel], record: str, values: dict[str, Any]) -> Any:
    try:
        return model.model_validate(values)
    except ValidationError as e:
        first = e.errors()[0]
        column = ".".join(str(part) for part in first["loc"]) or None
        raise RowDecodeError(record, column, first["msg"]) from e


class User(BaseModel):
    """A registered account. `id` never changes once created."""

    model_config = {"frozen": True}

    id: uuid.UUID
    username: StrictStr
    email_address: StrictStr
    gravatar_email_address: StrictStr
    account_verified: StrictBool
    password_hash: StrictStr
    biography: StrictStr | None = None

    @classmethod
    def read(cls, row: Any) -> User:
        """
        Decode one users row.

        Raises:
            RowDecodeError: If a column is missing or has the wrong shape.
        """
        return _validate(cls, "User", _read_columns(row, "User", USER_COLUMNS))

    def __repr__(self) -> str:
        return f"<User id={self.id!r} username={self.username!r}>"


class Issue(BaseModel):
    """
    A tracked issue.

    author_id and assigned_user_id reference users.id; the reference is not
    checked here. created_at <= updated_at is expected but not enforced.
    Timestamps are held as aware UTC datetimes.
    """

    model_config = {"frozen": True}

    id: uuid.UUID
    title: StrictStr
    description: StrictStr
    author_id: uuid.UUID
    assigned_user_id: uuid.UUID | None = None
    priority: Priority = Priority.NOT_ASSIGNED
    created_at: UtcDatetime
    updated_at: UtcDatetime
    is_closed: StrictBool = False

    @classmethod
    def read(cls, row: Any) -> Issue:
        """
        Decode one issues row.

        priority is read as an integer and converted with Priority.from_code.

        Raises:
            UnknownPriorityError: If the stored priority code is outside 0-4.
            RowDecodeError: If a column is missing or has the wrong shape.
        """
        values = _read_columns(row, "Issue", ISSUE_COLUMNS)
        code = values["priority"]
        if isinstance(code, bool) or not isinstance(code, int):
            raise RowDecodeError("Issue", "priority", f"expected integer, got {type(code).__name__}")
        values["priority"] = Priority.from_code(code)
        return _validate(cls, "Issue", values)

    def __repr__(self) -> str:
        return (
            f"<Issue id={self.id!r} title={self.title!r} "
            f"priority={self.priority.name} closed={self.is_closed!r}>"
        )


class FindIssueQuery(BaseModel):
    """Page request for find_issues. `page` is zero-indexed."""

    model_config = {"frozen": True}

    ordering: Ordering = Ordering.NO_ORDERING
    page: int = Field(default=0, ge=0)
    page_size: int = Field(default=20, gt=0)

    @property
    def offset(self) -> int:
        return self.page * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size
