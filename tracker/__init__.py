"""Issue Tracker — typed records and async data access for users and issues."""

from tracker.config import Ordering, Priority, settings
from tracker.errors import DbError, RowDecodeError, UnknownPriorityError
from tracker.records import FindIssueQuery, Issue, User
from tracker.result import DbResult

__all__ = [
    "DbError",
    "DbResult",
    "FindIssueQuery",
    "Issue",
    "Ordering",
    "Priority",
    "RowDecodeError",
    "UnknownPriorityError",
    "User",
    "settings",
]
