"""
Issue Tracker — User Queries

insert_user and try_find_user_by_id against the users table.
"""

from __future__ import annotations

import uuid

import structlog

from tracker.queries.runner import Connection, execute, query_single
from tracker.queries.statements import (
    USER_SELECT_LIST,
    USER_TYPES,
    build_statement,
    insert_sql,
)
from tracker.records import USER_COLUMNS, User
from tracker.result import DbResult

logger = structlog.get_logger(__name__)

_INSERT_USER = build_statement(insert_sql("users", USER_COLUMNS), USER_TYPES)

_SELECT_USER_BY_ID = build_statement(
    f"SELECT {USER_SELECT_LIST} FROM users WHERE id = :id",
    {"id": USER_TYPES["id"]},
    USER_TYPES,
)


def user_params(user: User) -> dict[str, object]:
    """All seven columns as named parameters. biography binds NULL when absent."""
    return {
        "id": user.id,
        "username": user.username,
        "email_address": user.email_address,
        "gravatar_email_address": user.gravatar_email_address,
        "account_verified": user.account_verified,
        "password_hash": user.password_hash,
        "biography": user.biography,
    }


async def insert_user(
    connection: Connection,
    user: User,
    *,
    timeout: float | None = None,
) -> DbResult[None]:
    """
    Insert one users row.

    No existence check: inserting the same id twice fails through the
    primary key and comes back as a DbError. The caller commits.
    """
    result = await execute(
        "insert_user", connection, _INSERT_USER, user_params(user), timeout=timeout
    )
    if result.ok:
        logger.info("user_inserted", user_id=str(user.id), source="queries.users")
    return result


async def try_find_user_by_id(
    connection: Connection,
    user_id: uuid.UUID,
    *,
    timeout: float | None = None,
) -> DbResult[User]:
    """
    Look up one user by id.

    Returns a successful result with value None when no row matches.
    """
    result = await query_single(
        "try_find_user_by_id",
        connection,
        _SELECT_USER_BY_ID,
        {"id": user_id},
        User.read,
        timeout=timeout,
    )
    if result.ok:
        logger.debug(
            "user_lookup",
            user_id=str(user_id),
            found=result.value is not None,
            source="queries.users",
        )
    return result
