"""
Issue Tracker — List or Search Issues

Usage:
    python scripts/list_issues.py --ordering highest_priority --page 0 --page-size 10
    python scripts/list_issues.py --search "crash"
"""

from __future__ import annotations

import argparse
import asyncio
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tracker.config import Ordering
from tracker.db import configure_logging, create_db_engine
from tracker.queries import TrackerStore
from tracker.records import FindIssueQuery, Issue


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print one page of issues, or search titles.")
    parser.add_argument(
        "--ordering",
        type=Ordering,
        default=Ordering.NO_ORDERING,
        choices=list(Ordering),
        help="Sort order, always descending (default: no_ordering = newest first).",
    )
    parser.add_argument("--page", type=int, default=0, help="Zero-indexed page number.")
    parser.add_argument("--page-size", type=int, default=20)
    parser.add_argument(
        "--search",
        type=str,
        default=None,
        help="Full-text title search instead of a page listing (PostgreSQL only).",
    )
    return parser.parse_args()


def format_issue(issue: Issue) -> str:
    state = "closed" if issue.is_closed else "open"
    return f"{issue.id}  [{issue.priority.name:<12}] [{state:<6}] {issue.title}"


async def load(args: argparse.Namespace) -> list[Issue]:
    engine, session_factory = create_db_engine()
    try:
        async with session_factory() as session:
            store = TrackerStore(session)
            if args.search is not None:
                result = await store.search_issues_by_title(args.search)
            else:
                query = FindIssueQuery(ordering=args.ordering, page=args.page, page_size=args.page_size)
                result = await store.find_issues(query)
            return result.unwrap()
    finally:
        await engine.dispose()


async def main() -> None:
    args = parse_args()
    configure_logging("WARNING")

    try:
        found = await load(args)
    except Exception as e:
        print(f"Failed to load issues: {e}", file=sys.stderr)
        sys.exit(1)

    for issue in found:
        print(format_issue(issue))
    if not found:
        print("No issues found.")


if __name__ == "__main__":
    asyncio.run(main())
