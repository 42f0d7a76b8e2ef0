"""
Issue Tracker — Shared pytest Fixtures & Configuration

Provides common fixtures for all test modules:
- In-memory SQLite database built from the table models (aiosqlite)
- Mock async session for statements SQLite cannot run
- Record builders for users and issues
- Async test support via pytest-asyncio
"""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from tracker.config import Priority
from tracker.models.base import Base
from tracker.records import Issue, User


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

pytest_plugins = ("pytest_asyncio",)


# ---------------------------------------------------------------------------
# Database Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    In-memory SQLite engine with the users and issues tables.

    Creates a fresh database for each test, ensuring isolation.
    """
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def db_session(db_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Session on the in-memory database. Tests own commit/rollback."""
    session_factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
def mock_session() -> AsyncMock:
    """
    AsyncSession stand-in whose execute() returns no rows.

    Tests set `mock_session.execute.return_value.all.return_value` (or
    `.first.return_value`) to feed rows, and read `execute.call_args` to
    inspect the statement and bound parameters.
    """
    session = AsyncMock(spec=AsyncSession)
    result = MagicMock()
    result.all.return_value = []
    result.first.return_value = None
    session.execute.return_value = result
    return session


# ---------------------------------------------------------------------------
# Record Builders
# ---------------------------------------------------------------------------


BASE_TIME = datetime(2026, 3, 1, 9, 0, 0, tzinfo=timezone.utc)


def make_user(**overrides) -> User:
    """User with sensible defaults; any field can be overridden."""
    fields = {
        "id": uuid.uuid4(),
        "username": "ada",
        "email_address": "ada@example.com",
        "gravatar_email_address": "ada@example.com",
        "account_verified": True,
        "password_hash": "$2b$12$abcdefghijklmnopqrstuv",
        "biography": None,
    }
    fields.update(overrides)
    return User(**fields)


def make_issue(**overrides) -> Issue:
    """
    Issue with sensible defaults; any field can be overridden.

    Timestamps are aware UTC, the form every Issue holds.
    """
    fields = {
        "id": uuid.uuid4(),
        "title": "Crash on startup",
        "description": "The app exits before the window opens.",
        "author_id": uuid.uuid4(),
        "assigned_user_id": None,
        "priority": Priority.MEDIUM,
        "created_at": BASE_TIME,
        "updated_at": BASE_TIME + timedelta(hours=1),
        "is_closed": False,
    }
    fields.update(overrides)
    return Issue(**fields)


@pytest.fixture
def user_factory():
    """make_user as a fixture, for tests that build several users."""
    return make_user


@pytest.fixture
def issue_factory():
    """make_issue as a fixture, for tests that build several issues."""
    return make_issue
