"""
Issue Tracker — Logging & Engine Helpers

For callers and the admin scripts. The query functions never create
engines or sessions: they only use the connection they are given.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from tracker.config import settings


# ---------------------------------------------------------------------------
# Structlog Configuration
# ---------------------------------------------------------------------------


def configure_logging(log_level: str | None = None) -> None:
    """
    Set up structured logging with JSON output.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
            Defaults to settings.LOG_LEVEL.
    """
    level = (log_level or settings.LOG_LEVEL).upper()

    # Configure stdlib logging first (for SQLAlchemy and the drivers)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level),
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


# ---------------------------------------------------------------------------
# Database Setup
# ---------------------------------------------------------------------------


def create_db_engine(
    database_url: str | None = None,
) -> tuple[AsyncEngine, async_sessionmaker[AsyncSession]]:
    """
    Create SQLAlchemy async engine and session factory.

    Uses settings.DATABASE_URL (asyncpg) unless a URL is passed. Pool sizing
    only applies to server databases; SQLite URLs keep SQLAlchemy's default.

    Returns:
        (engine, session_factory) tuple.
    """
    logger = structlog.get_logger(__name__)
    url = make_url(database_url or settings.DATABASE_URL)

    logger.info("database_engine_initializing", database_url=url.render_as_string(hide_password=True))

    engine_kwargs: dict[str, Any] = {"echo": settings.DB_ECHO}
    if url.get_backend_name() != "sqlite":
        engine_kwargs.update(
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_pre_ping=True,  # Verify connections before use
        )

    engine = create_async_engine(url, **engine_kwargs)
    session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    logger.info("database_engine_ready", backend=url.get_backend_name())
    return engine, session_factory
