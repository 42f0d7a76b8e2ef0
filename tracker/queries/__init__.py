from tracker.queries.issues import (
    find_issue_by_id,
    find_issues,
    insert_issue,
    search_issues_by_title,
)
from tracker.queries.users import insert_user, try_find_user_by_id
from tracker.queries.store import (
    FindIssueById,
    FindIssues,
    InsertIssue,
    InsertUser,
    SearchIssuesByTitle,
    TrackerStore,
    TryFindUserById,
)

__all__ = [
    "FindIssueById",
    "FindIssues",
    "InsertIssue",
    "InsertUser",
    "SearchIssuesByTitle",
    "TrackerStore",
    "TryFindUserById",
    "find_issue_by_id",
    "find_issues",
    "insert_issue",
    "insert_user",
    "search_issues_by_title",
    "try_find_user_by_id",
]
