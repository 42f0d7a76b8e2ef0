"""
Issue Tracker — Admin Issue Creation Script

Usage:
    python scripts/add_issue.py --author-id <uuid> --title "Crash on startup" --priority urgent
    python scripts/add_issue.py --author-id <uuid> --title "Typo" --description "..." --assignee-id <uuid>
"""

from __future__ import annotations

import argparse
import asyncio
import os
import sys
import uuid
from datetime import datetime, timezone

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tracker.config import Priority
from tracker.db import configure_logging, create_db_engine
from tracker.queries import insert_issue, try_find_user_by_id
from tracker.records import Issue

PRIORITY_CHOICES = {p.name.lower(): p for p in Priority}


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a new issue (issues row).")
    parser.add_argument("--author-id", type=uuid.UUID, required=True, help="users.id of the reporter.")
    parser.add_argument("--title", type=str, required=True)
    parser.add_argument("--description", type=str, default="")
    parser.add_argument("--assignee-id", type=uuid.UUID, default=None, help="Optional users.id.")
    parser.add_argument(
        "--priority",
        type=str,
        default="not_assigned",
        choices=sorted(PRIORITY_CHOICES),
        help="Issue priority (default: not_assigned).",
    )
    return parser.parse_args()


async def create_issue(args: argparse.Namespace) -> uuid.UUID:
    """
    Insert the issues row and commit.

    The data layer does not check author_id; this script looks the author up
    first so an admin typo fails loudly instead of leaving an orphaned row.
    """
    engine, session_factory = create_db_engine()
    now = datetime.now(timezone.utc)

    issue = Issue(
        id=uuid.uuid4(),
        title=args.title,
        description=args.description,
        author_id=args.author_id,
        assigned_user_id=args.assignee_id,
        priority=PRIORITY_CHOICES[args.priority],
        created_at=now,
        updated_at=now,
        is_closed=False,
    )

    try:
        async with session_factory() as session:
            author = (await try_find_user_by_id(session, args.author_id)).unwrap()
            if author is None:
                raise LookupError(f"no user with id {args.author_id}")
            (await insert_issue(session, issue)).unwrap()
            await session.commit()
    finally:
        await engine.dispose()

    return issue.id


async def main() -> None:
    args = parse_args()
    configure_logging()

    try:
        issue_id = await create_issue(args)
        print("Issue created successfully.")
        print(f"  issues.id = {issue_id}")
        print(f"  priority  = {PRIORITY_CHOICES[args.priority].name}")
    except Exception as e:
        print(f"Failed to create issue: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
