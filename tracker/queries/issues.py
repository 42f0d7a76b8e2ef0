"""
Issue Tracker — Issue Queries

insert_issue, find_issue_by_id, find_issues (paginated, ordered) and
search_issues_by_title (PostgreSQL full-text search on the title).

ORDER BY columns come from the fixed Ordering mapping and are compiled into
one statement per Ordering up front. Nothing the caller passes is ever
interpolated into SQL text.
"""

from __future__ import annotations

import uuid

import structlog
from sqlalchemy import Integer, String

from tracker.config import Ordering, settings
from tracker.queries.runner import Connection, execute, query_all, query_single
from tracker.queries.statements import (
    ISSUE_SELECT_LIST,
    ISSUE_TYPES,
    ORDER_COLUMNS,
    build_statement,
    insert_sql,
    order_column,
)
from tracker.records import ISSUE_COLUMNS, FindIssueQuery, Issue
from tracker.result import DbResult

logger = structlog.get_logger(__name__)

_INSERT_ISSUE = build_statement(insert_sql("issues", ISSUE_COLUMNS), ISSUE_TYPES)

_SELECT_ISSUE_BY_ID = build_statement(
    f"SELECT {ISSUE_SELECT_LIST} FROM issues WHERE id = :id",
    {"id": ISSUE_TYPES["id"]},
    ISSUE_TYPES,
)

_PAGE_TYPES = {"limit": Integer(), "offset": Integer()}


def _page_statement(column: str):
    # id DESC breaks ties so consecutive pages neither overlap nor skip rows
    return build_statement(
        f"SELECT {ISSUE_SELECT_LIST} FROM issues "
        f"ORDER BY {column} DESC, id DESC "
        "LIMIT :limit OFFSET :offset",
        _PAGE_TYPES,
        ISSUE_TYPES,
    )


_FIND_ISSUES = {ordering: _page_statement(column) for ordering, column in ORDER_COLUMNS.items()}

_TS_VECTOR = "to_tsvector(CAST(:ts_config AS regconfig), title)"
_TS_QUERY = "plainto_tsquery(CAST(:ts_config AS regconfig), :query)"

_SEARCH_ISSUES_BY_TITLE = build_statement(
    f"""
    SELECT {ISSUE_SELECT_LIST} FROM issues
    WHERE {_TS_VECTOR} @@ {_TS_QUERY}
    ORDER BY ts_rank({_TS_VECTOR}, {_TS_QUERY}) DESC, id DESC
    """,
    {"ts_config": String(), "query": String()},
    ISSUE_TYPES,
)


def issue_params(issue: Issue) -> dict[str, object]:
    """All nine columns as named parameters. priority binds its integer code."""
    return {
        "id": issue.id,
        "title": issue.title,
        "description": issue.description,
        "author_id": issue.author_id,
        "assigned_user_id": issue.assigned_user_id,
        "priority": int(issue.priority),
        "created_at": issue.created_at,
        "updated_at": issue.updated_at,
        "is_closed": issue.is_closed,
    }


async def insert_issue(
    connection: Connection,
    issue: Issue,
    *,
    timeout: float | None = None,
) -> DbResult[None]:
    """
    Insert one issues row.

    author_id is not checked against users. A repeated id fails through the
    primary key and comes back as a DbError. The caller commits.
    """
    result = await execute(
        "insert_issue", connection, _INSERT_ISSUE, issue_params(issue), timeout=timeout
    )
    if result.ok:
        logger.info(
            "issue_inserted",
            issue_id=str(issue.id),
            priority=issue.priority.name,
            source="queries.issues",
        )
    return result


async def find_issue_by_id(
    connection: Connection,
    issue_id: uuid.UUID,
    *,
    timeout: float | None = None,
) -> DbResult[Issue]:
    """Look up one issue by id; a successful None when no row matches."""
    return await query_single(
        "find_issue_by_id",
        connection,
        _SELECT_ISSUE_BY_ID,
        {"id": issue_id},
        Issue.read,
        timeout=timeout,
    )


async def find_issues(
    connection: Connection,
    query: FindIssueQuery,
    *,
    timeout: float | None = None,
) -> DbResult[list[Issue]]:
    """
    One page of issues, sorted descending by the query's ordering.

    NO_ORDERING and LATEST both sort by created_at. offset is
    page * page_size and limit is page_size.
    """
    column = order_column(query.ordering)
    result = await query_all(
        "find_issues",
        connection,
        _FIND_ISSUES[Ordering(query.ordering)],
        {"limit": query.limit, "offset": query.offset},
        Issue.read,
        timeout=timeout,
    )
    if result.ok:
        logger.debug(
            "issues_page_loaded",
            order_column=column,
            page=query.page,
            page_size=query.page_size,
            returned=len(result.value),
            source="queries.issues",
        )
    return result


async def search_issues_by_title(
    connection: Connection,
    query: str,
    *,
    timeout: float | None = None,
) -> DbResult[list[Issue]]:
    """
    Full-text search over issue titles (PostgreSQL only).

    The query is tokenized with plainto_tsquery, so "foo" matches the word
    foo, not every title containing the substring. Best matches first.
    Unpaginated: callers must not assume a bound on the result size.
    """
    result = await query_all(
        "search_issues_by_title",
        connection,
        _SEARCH_ISSUES_BY_TITLE,
        {"ts_config": settings.SEARCH_TEXT_CONFIG, "query": query},
        Issue.read,
        timeout=timeout,
    )
    if result.ok:
        logger.debug(
            "issues_search",
            query=query,
            returned=len(result.value),
            source="queries.issues",
        )
    return result
