"""
Issue Tracker — Parameterized Statement Building

Every query is literal SQL with named placeholders. Each placeholder and each
result column gets an explicit SQLAlchemy type so values round-trip the same
way on PostgreSQL (asyncpg) and SQLite (aiosqlite): UUIDs, booleans and
timestamps are converted by the type, never by hand.
"""

from __future__ import annotations

from sqlalchemy import Boolean, DateTime, Integer, String, Text, bindparam, text
from sqlalchemy.sql.elements import TextClause
from sqlalchemy.sql.selectable import TextualSelect
from sqlalchemy.types import TypeEngine, Uuid

from tracker.config import Ordering
from tracker.records import ISSUE_COLUMNS, USER_COLUMNS

USER_TYPES: dict[str, TypeEngine] = {
    "id": Uuid(),
    "username": String(),
    "email_address": String(),
    "gravatar_email_address": String(),
    "account_verified": Boolean(),
    "password_hash": String(),
    "biography": Text(),
}

ISSUE_TYPES: dict[str, TypeEngine] = {
    "id": Uuid(),
    "title": String(),
    "description": Text(),
    "author_id": Uuid(),
    "assigned_user_id": Uuid(),
    "priority": Integer(),
    "created_at": DateTime(timezone=True),
    "updated_at": DateTime(timezone=True),
    "is_closed": Boolean(),
}

USER_SELECT_LIST = ", ".join(USER_COLUMNS)
ISSUE_SELECT_LIST = ", ".join(ISSUE_COLUMNS)

# Ordering -> trusted column literal for ORDER BY. Never a bound value.
ORDER_COLUMNS: dict[Ordering, str] = {
    Ordering.NO_ORDERING: "created_at",
    Ordering.LATEST: "created_at",
    Ordering.TITLE: "title",
    Ordering.HIGHEST_PRIORITY: "priority",
    Ordering.RECENTLY_UPDATED: "updated_at",
}


def order_column(ordering: Ordering) -> str:
    """
    Map an Ordering to its sort column.

    Raises:
        ValueError: If ordering is not an Ordering member.
    """
    try:
        return ORDER_COLUMNS[Ordering(ordering)]
    except (KeyError, ValueError):
        raise ValueError(f"unsupported ordering: {ordering!r}") from None


def insert_sql(table: str, columns: tuple[str, ...]) -> str:
    """INSERT with one named placeholder per column, same name as the column."""
    names = ", ".join(columns)
    placeholders = ", ".join(f":{c}" for c in columns)
    return f"INSERT INTO {table} ({names}) VALUES ({placeholders})"


def build_statement(
    sql: str,
    bind_types: dict[str, TypeEngine],
    result_types: dict[str, TypeEngine] | None = None,
) -> TextClause | TextualSelect:
    """
    Attach typed bind parameters (and typed result columns for SELECTs).

    Every name in bind_types must appear as :name in sql.
    """
    stmt = text(sql).bindparams(
        *(bindparam(name, type_=type_) for name, type_ in bind_types.items())
    )
    if result_types:
        return stmt.columns(**result_types)
    return stmt
