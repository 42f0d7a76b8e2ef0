"""
Issue Tracker — Query Execution

One awaited round-trip per call on a caller-owned AsyncSession or
AsyncConnection. The runner never opens, commits or closes the connection.

Driver failures, decode failures and timeouts come back as a DbResult
carrying a DbError; any other exception is a bug and propagates.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar, Union

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncSession
from sqlalchemy.sql.elements import TextClause
from sqlalchemy.sql.selectable import TextualSelect

from tracker.config import settings
from tracker.errors import DbError, RowDecodeError
from tracker.result import DbResult

logger = structlog.get_logger(__name__)

T = TypeVar("T")

Connection = Union[AsyncSession, AsyncConnection]
Statement = Union[TextClause, TextualSelect]
RowReader = Callable[[Any], T]


def resolve_timeout(timeout: float | None) -> float | None:
    """Per-call timeout in seconds; None or 0 from settings means no limit."""
    seconds = settings.QUERY_TIMEOUT_SECONDS if timeout is None else timeout
    if seconds is None or seconds <= 0:
        return None
    return seconds


async def _guarded(
    operation: str,
    call: Awaitable[T],
    timeout: float | None,
) -> DbResult[T]:
    seconds = resolve_timeout(timeout)
    try:
        value = await asyncio.wait_for(call, timeout=seconds)
    except (SQLAlchemyError, RowDecodeError, asyncio.TimeoutError) as e:
        logger.error(
            "query_failed",
            operation=operation,
            error=str(e),
            error_type=type(e).__name__,
            timeout_seconds=seconds,
            source="queries",
        )
        return DbResult.failure(DbError(operation, e))
    return DbResult.success(value)


async def execute(
    operation: str,
    connection: Connection,
    statement: Statement,
    params: dict[str, Any],
    *,
    timeout: float | None = None,
) -> DbResult[None]:
    """Run a statement that returns no rows (INSERT)."""

    async def _call() -> None:
        await connection.execute(statement, params)

    return await _guarded(operation, _call(), timeout)


async def query_single(
    operation: str,
    connection: Connection,
    statement: Statement,
    params: dict[str, Any],
    read: RowReader[T],
    *,
    timeout: float | None = None,
) -> DbResult[T]:
    """Decode the first row, or succeed with None when there is no row."""

    async def _call() -> T | None:
        result = await connection.execute(statement, params)
        row = result.first()
        return None if row is None else read(row)

    return await _guarded(operation, _call(), timeout)


async def query_all(
    operation: str,
    connection: Connection,
    statement: Statement,
    params: dict[str, Any],
    read: RowReader[T],
    *,
    timeout: float | None = None,
) -> DbResult[list[T]]:
    """Decode every row, preserving the order the database returned."""

    async def _call() -> list[T]:
        result = await connection.execute(statement, params)
        return [read(row) for row in result.all()]

    return await _guarded(operation, _call(), timeout)
