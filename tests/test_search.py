"""
Tests for search_issues_by_title.

The predicate is PostgreSQL full-text search, so these tests drive a mock
session and check the statement, the bound parameters and the decoding of
the returned rows. tests/test_postgres_integration.py runs it for real.
"""

from __future__ import annotations

from sqlalchemy.exc import ProgrammingError

from tracker.config import Priority, settings
from tracker.errors import UnknownPriorityError
from tracker.queries.issues import search_issues_by_title


def _sql(mock_session) -> str:
    statement, _ = mock_session.execute.call_args.args
    return " ".join(str(statement).split())


class TestSearchStatement:
    async def test_uses_tokenized_full_text_predicate(self, mock_session) -> None:
        await search_issues_by_title(mock_session, "crash")

        sql = _sql(mock_session)
        assert "to_tsvector(CAST(:ts_config AS regconfig), title)" in sql
        assert "@@ plainto_tsquery(CAST(:ts_config AS regconfig), :query)" in sql
        assert "LIKE" not in sql.upper()

    async def test_orders_by_rank(self, mock_session) -> None:
        await search_issues_by_title(mock_session, "crash")
        assert "ORDER BY ts_rank(" in _sql(mock_session)

    async def test_query_text_is_bound_not_interpolated(self, mock_session) -> None:
        hostile = "crash'); DROP TABLE issues; --"
        await search_issues_by_title(mock_session, hostile)

        _, params = mock_session.execute.call_args.args
        assert params == {"ts_config": settings.SEARCH_TEXT_CONFIG, "query": hostile}
        assert "DROP TABLE" not in _sql(mock_session)

    async def test_text_search_config_comes_from_settings(self, mock_session, monkeypatch) -> None:
        monkeypatch.setattr(settings, "SEARCH_TEXT_CONFIG", "english")
        await search_issues_by_title(mock_session, "crashes")

        _, params = mock_session.execute.call_args.args
        assert params["ts_config"] == "english"

    async def test_is_not_paginated(self, mock_session) -> None:
        await search_issues_by_title(mock_session, "crash")
        sql = _sql(mock_session)
        assert "LIMIT" not in sql
        assert "OFFSET" not in sql


class TestSearchResults:
    async def test_rows_decode_in_returned_order(self, mock_session, issue_factory) -> None:
        issues = [
            issue_factory(title="Crash on startup", priority=Priority.URGENT),
            issue_factory(title="Crash when saving"),
        ]
        mock_session.execute.return_value.all.return_value = [i.model_dump() for i in issues]

        found = await search_issues_by_title(mock_session, "crash")

        assert found.ok
        assert found.value == issues

    async def test_no_match_is_an_empty_list(self, mock_session) -> None:
        found = await search_issues_by_title(mock_session, "nonexistent")
        assert found.ok
        assert found.value == []

    async def test_one_bad_row_fails_the_whole_call(self, mock_session, issue_factory) -> None:
        good = issue_factory().model_dump()
        bad = issue_factory().model_dump()
        bad["priority"] = 17
        mock_session.execute.return_value.all.return_value = [good, bad]

        found = await search_issues_by_title(mock_session, "crash")

        assert not found.ok
        assert isinstance(found.error.cause, UnknownPriorityError)

    async def test_database_error_is_returned(self, mock_session) -> None:
        mock_session.execute.side_effect = ProgrammingError(
            "SELECT ...", {}, Exception('function to_tsvector does not exist')
        )

        found = await search_issues_by_title(mock_session, "crash")

        assert not found.ok
        assert found.error.operation == "search_issues_by_title"
        assert isinstance(found.error.cause, ProgrammingError)
