"""Tests for the parameterized statement builders."""

from __future__ import annotations

import pytest
from sqlalchemy import Integer, String
from sqlalchemy.exc import ArgumentError

from tracker.config import Ordering
from tracker.queries.statements import (
    ISSUE_TYPES,
    ORDER_COLUMNS,
    USER_TYPES,
    build_statement,
    insert_sql,
    order_column,
)
from tracker.records import ISSUE_COLUMNS, USER_COLUMNS


class TestOrderColumn:
    def test_every_ordering_has_a_column(self) -> None:
        assert set(ORDER_COLUMNS) == set(Ordering)

    def test_mapping(self) -> None:
        assert order_column(Ordering.TITLE) == "title"
        assert order_column(Ordering.HIGHEST_PRIORITY) == "priority"
        assert order_column(Ordering.RECENTLY_UPDATED) == "updated_at"
        assert order_column(Ordering.LATEST) == "created_at"
        assert order_column(Ordering.NO_ORDERING) == "created_at"

    def test_columns_are_real_issue_columns(self) -> None:
        assert set(ORDER_COLUMNS.values()) <= set(ISSUE_COLUMNS)

    @pytest.mark.parametrize("value", ["title DESC; DELETE FROM issues", "description", 3])
    def test_freeform_values_are_rejected(self, value) -> None:
        with pytest.raises(ValueError):
            order_column(value)

    def test_string_value_of_a_member_is_accepted(self) -> None:
        assert order_column("recently_updated") == "updated_at"


class TestInsertSql:
    def test_one_named_placeholder_per_column(self) -> None:
        sql = insert_sql("users", USER_COLUMNS)
        assert sql.startswith("INSERT INTO users (id, username, email_address,")
        for column in USER_COLUMNS:
            assert f":{column}" in sql

    def test_issue_insert_binds_nine_columns(self) -> None:
        sql = insert_sql("issues", ISSUE_COLUMNS)
        assert sql.count(":") == 9


class TestBuildStatement:
    def test_types_cover_every_column(self) -> None:
        assert tuple(USER_TYPES) == USER_COLUMNS
        assert tuple(ISSUE_TYPES) == ISSUE_COLUMNS

    def test_bind_parameters_carry_their_types(self) -> None:
        stmt = build_statement("SELECT 1 WHERE :a = :b", {"a": Integer(), "b": String()})
        assert isinstance(stmt._bindparams["a"].type, Integer)
        assert isinstance(stmt._bindparams["b"].type, String)

    def test_select_gets_typed_result_columns(self) -> None:
        stmt = build_statement("SELECT id, title FROM issues", {}, {"id": ISSUE_TYPES["id"], "title": String()})
        assert [c.name for c in stmt.selected_columns] == ["id", "title"]

    def test_unknown_bind_name_is_rejected(self) -> None:
        with pytest.raises(ArgumentError):
            build_statement("SELECT 1 WHERE x = :a", {"missing": Integer()})
