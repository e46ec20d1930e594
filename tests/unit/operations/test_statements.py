"""
Unit tests for INSERT, UPDATE and DELETE builders and StatementBuilder.
"""

import pytest

from sqlite_statements import (
    ColumnValues,
    ConflictPolicy,
    InvalidArgumentError,
    MalformedFilterError,
    SQLStatement,
    StatementBuilder,
    build_delete,
    build_insert,
    build_update,
)
from sqlite_statements.config import Settings


@pytest.mark.unit
class TestBuildInsert:
    """Tests for build_insert."""

    def test_columns_reordered_alphabetically(self):
        statement = build_insert("t", {"b": 2, "a": 1}, ConflictPolicy.NONE)
        assert statement.sql == "INSERT INTO t (a, b) VALUES (?, ?);"
        assert statement.bindings == (1, 2)

    def test_default_conflict_is_none(self):
        assert build_insert("t", {"a": 1}).sql == "INSERT INTO t (a) VALUES (?);"

    def test_empty_values_with_replace(self):
        statement = build_insert("t", {}, ConflictPolicy.REPLACE)
        assert statement.sql == "INSERT OR REPLACE INTO t DEFAULT VALUES;"
        assert statement.bindings == ()

    @pytest.mark.parametrize(
        "conflict, expected",
        [
            (ConflictPolicy.ROLLBACK, "INSERT OR ROLLBACK INTO t (a) VALUES (?);"),
            (ConflictPolicy.ABORT, "INSERT OR ABORT INTO t (a) VALUES (?);"),
            (ConflictPolicy.FAIL, "INSERT OR FAIL INTO t (a) VALUES (?);"),
            (ConflictPolicy.IGNORE, "INSERT OR IGNORE INTO t (a) VALUES (?);"),
            (5, "INSERT OR REPLACE INTO t (a) VALUES (?);"),
        ],
    )
    def test_conflict_fragments(self, conflict, expected):
        assert build_insert("t", {"a": 1}, conflict).sql == expected

    def test_unknown_conflict_code_is_rejected(self):
        with pytest.raises(ValueError):
            build_insert("t", {"a": 1}, 6)

    def test_accepts_column_values(self):
        values = ColumnValues()
        values.put("name", "Rex")
        values.put_null("owner_id")
        statement = build_insert("pets", values)
        assert statement.sql == "INSERT INTO pets (name, owner_id) VALUES (?, ?);"
        assert statement.bindings == ("Rex", None)


@pytest.mark.unit
class TestBuildUpdate:
    """Tests for build_update."""

    def test_where_args_are_inlined_not_bound(self):
        statement = build_update("t", {"x": 1}, "id=?", ["5"])
        assert statement.sql == "UPDATE t SET x=? WHERE id='5';"
        assert statement.bindings == (1,)

    def test_without_where(self):
        statement = build_update("t", {"b": 2, "a": 1})
        assert statement.sql == "UPDATE t SET a=?, b=?;"
        assert statement.bindings == (1, 2)

    def test_where_without_args_is_used_verbatim(self):
        statement = build_update("t", {"x": 1}, "id=?")
        assert statement.sql == "UPDATE t SET x=? WHERE id=?;"

    def test_empty_values_are_not_rejected(self):
        assert build_update("t", {}).sql == "UPDATE t SET ;"

    def test_malformed_filter(self):
        with pytest.raises(MalformedFilterError):
            build_update("t", {"x": 1}, "id=? AND y=?", ["5"])

    def test_null_filter_arg(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            build_update("t", {"x": 1}, "id=?", [None])
        assert exc_info.value.index == 0


@pytest.mark.unit
class TestBuildDelete:
    """Tests for build_delete."""

    def test_without_where(self):
        assert build_delete("t") == "DELETE FROM t;"

    def test_with_where_args(self):
        assert build_delete("t", "a=? AND b=?", ["x", "y"]) == "DELETE FROM t WHERE a='x' AND b='y';"

    def test_where_without_args(self):
        assert build_delete("t", "id IS NULL") == "DELETE FROM t WHERE id IS NULL;"

    def test_malformed_filter(self):
        with pytest.raises(MalformedFilterError):
            build_delete("t", "a=?", [])


@pytest.mark.unit
class TestIdempotence:
    """Identical inputs always produce identical output."""

    def test_builders_are_repeatable(self):
        values = {"name": "Rex", "age": 3, "weight": 12.5}
        assert build_insert("pets", values, ConflictPolicy.IGNORE) == build_insert(
            "pets", values, ConflictPolicy.IGNORE
        )
        assert build_update("pets", values, "id=?", ["1"]) == build_update(
            "pets", values, "id=?", ["1"]
        )
        assert build_delete("pets", "id=?", ["1"]) == build_delete("pets", "id=?", ["1"])

    def test_insertion_order_does_not_matter(self):
        first = build_insert("t", {"a": 1, "b": 2, "c": 3})
        second = build_insert("t", {"c": 3, "a": 1, "b": 2})
        assert first == second


@pytest.mark.unit
class TestStatementBuilder:
    """Tests for the table-bound StatementBuilder."""

    def test_insert_uses_configured_default_conflict(self):
        builder = StatementBuilder("t", settings=Settings(default_conflict="ignore"))
        assert builder.insert({"a": 1}).sql == "INSERT OR IGNORE INTO t (a) VALUES (?);"

    def test_explicit_conflict_overrides_default(self):
        builder = StatementBuilder("t", settings=Settings(default_conflict="ignore"))
        statement = builder.insert({"a": 1}, ConflictPolicy.NONE)
        assert statement.sql == "INSERT INTO t (a) VALUES (?);"

    def test_default_settings_from_environment(self, monkeypatch):
        monkeypatch.setenv("SQLSTMT_DEFAULT_CONFLICT", "replace")
        builder = StatementBuilder("t")
        assert builder.insert({}).sql == "INSERT OR REPLACE INTO t DEFAULT VALUES;"

    def test_update_and_delete(self):
        builder = StatementBuilder("pets", settings=Settings())
        assert builder.update({"age": 4}, "id=?", [9]) == SQLStatement(
            "UPDATE pets SET age=? WHERE id='9';", (4,)
        )
        assert builder.delete("id=?", [9]) == "DELETE FROM pets WHERE id='9';"

    def test_repr(self):
        assert repr(StatementBuilder("pets", settings=Settings())) == "StatementBuilder(table='pets')"


@pytest.mark.unit
class TestInvalidEnvironment:
    """Builders keep working when unrelated settings fail validation."""

    def test_insert_with_unsupported_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warn")
        statement = build_insert("t", {"a": 1})
        assert statement.sql == "INSERT INTO t (a) VALUES (?);"
        assert statement.bindings == (1,)

    def test_update_and_delete_with_unknown_default_conflict(self, monkeypatch):
        monkeypatch.setenv("SQLSTMT_DEFAULT_CONFLICT", "upsert")
        assert build_update("t", {"x": 1}, "id=?", ["5"]).sql == "UPDATE t SET x=? WHERE id='5';"
        assert build_delete("t") == "DELETE FROM t;"
