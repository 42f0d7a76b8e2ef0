"""
Issue Tracker — Connection-bound Query Store

TrackerStore binds one caller-owned connection (and optionally a default
timeout) to the six query functions, so request handlers can be handed a
single object instead of threading the connection through every call.

Usage:
    async with session_factory() as session:
        store = TrackerStore(session)
        result = await store.find_issues(FindIssueQuery(ordering=Ordering.TITLE))
        await session.commit()
"""

from __future__ import annotations

import uuid
from collections.abc import Awaitable, Callable

from tracker.queries import issues, users
from tracker.queries.runner import Connection
from tracker.records import FindIssueQuery, Issue, User
from tracker.result import DbResult

InsertUser = Callable[[User], Awaitable[DbResult[None]]]
TryFindUserById = Callable[[uuid.UUID], Awaitable[DbResult[User]]]
InsertIssue = Callable[[Issue], Awaitable[DbResult[None]]]
FindIssueById = Callable[[uuid.UUID], Awaitable[DbResult[Issue]]]
FindIssues = Callable[[FindIssueQuery], Awaitable[DbResult[list[Issue]]]]
SearchIssuesByTitle = Callable[[str], Awaitable[DbResult[list[Issue]]]]


class TrackerStore:
    """The data-access operations bound to one connection."""

    def __init__(self, connection: Connection, timeout: float | None = None) -> None:
        self.connection = connection
        self.timeout = timeout

    async def insert_user(self, user: User) -> DbResult[None]:
        return await users.insert_user(self.connection, user, timeout=self.timeout)

    async def try_find_user_by_id(self, user_id: uuid.UUID) -> DbResult[User]:
        return await users.try_find_user_by_id(self.connection, user_id, timeout=self.timeout)

    async def insert_issue(self, issue: Issue) -> DbResult[None]:
        return await issues.insert_issue(self.connection, issue, timeout=self.timeout)

    async def find_issue_by_id(self, issue_id: uuid.UUID) -> DbResult[Issue]:
        return await issues.find_issue_by_id(self.connection, issue_id, timeout=self.timeout)

    async def find_issues(self, query: FindIssueQuery) -> DbResult[list[Issue]]:
        return await issues.find_issues(self.connection, query, timeout=self.timeout)

    async def search_issues_by_title(self, query: str) -> DbResult[list[Issue]]:
        return await issues.search_issues_by_title(self.connection, query, timeout=self.timeout)

    def __repr__(self) -> str:
        return f"<TrackerStore connection={type(self.connection).__name__} timeout={self.timeout!r}>"
