"""
Issue Tracker — Admin User Registration Script

Creates a users row. The password must already be hashed: this script
stores whatever it is given in password_hash.

Usage:
    python scripts/add_user.py --username ada --email ada@example.com --password-hash '$2b$12$...'
    python scripts/add_user.py --username ada --email ada@example.com --password-hash '...' --verified --bio "Maintainer"
"""

from __future__ import annotations

import argparse
import asyncio
import os
import sys
import uuid

# Resolve project root so this script can be run from any working directory
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tracker.db import configure_logging, create_db_engine
from tracker.queries import insert_user
from tracker.records import User


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Create a new issue tracker user (users row).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/add_user.py --username ada --email ada@example.com --password-hash '$2b$12$abc'
  python scripts/add_user.py --username bob --email bob@example.com --password-hash '...' \\
      --gravatar-email bob@gravatar.example --verified --bio "Triage lead"
""",
    )
    parser.add_argument("--username", type=str, required=True, help="Login name.")
    parser.add_argument("--email", type=str, required=True, help="Contact email address.")
    parser.add_argument(
        "--gravatar-email",
        type=str,
        default=None,
        help="Address used for the avatar lookup (default: same as --email).",
    )
    parser.add_argument(
        "--password-hash",
        type=str,
        required=True,
        help="Already-hashed password. Stored verbatim.",
    )
    parser.add_argument(
        "--verified",
        action="store_true",
        help="Mark the account as verified.",
    )
    parser.add_argument("--bio", type=str, default=None, help="Optional biography.")
    return parser.parse_args()


async def create_user(args: argparse.Namespace) -> uuid.UUID:
    """Insert the users row and commit."""
    engine, session_factory = create_db_engine()

    user = User(
        id=uuid.uuid4(),
        username=args.username,
        email_address=args.email,
        gravatar_email_address=(args.gravatar_email or args.email).strip().lower(),
        account_verified=args.verified,
        password_hash=args.password_hash,
        biography=args.bio,
    )

    try:
        async with session_factory() as session:
            result = await insert_user(session, user)
            result.unwrap()
            await session.commit()
    finally:
        await engine.dispose()

    return user.id


async def main() -> None:
    args = parse_args()
    configure_logging()

    print(f"Creating user: username={args.username}, email={args.email}")

    try:
        user_id = await create_user(args)
        print("User created successfully.")
        print(f"  users.id         = {user_id}")
        print(f"  username         = {args.username}")
        print(f"  account_verified = {args.verified}")
    except Exception as e:
        print(f"Failed to create user: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
