"""Tests for WHERE/AND/OR condition groups."""

import pytest

from sqlchain.builder import StatementBuilder
from sqlchain.exceptions import InvalidOperationError


class TestConditions:
    """Test cases for condition fragments and their parameters."""

    def test_where_default_operator(self) -> None:
        result = StatementBuilder("users").select().where("id", 3).build()

        assert result.query == "SELECT * FROM users WHERE id = ?"
        assert result.params == [3]

    @pytest.mark.parametrize("operator", ["<", ">=", "<>", "LIKE"])
    def test_where_custom_operator(self, operator: str) -> None:
        result = StatementBuilder("users").select().where("name", "A%", operator).build()

        assert result.query == f"SELECT * FROM users WHERE name {operator} ?"

    def test_and_or_chain(self) -> None:
        """Test one WHERE followed by k AND/OR fragments, in call order."""
        builder = (
            StatementBuilder("users")
            .select()
            .where("age", 18, ">=")
            .and_("active", 1)
            .and_("country", "PT")
            .or_("role", "admin")
        )

        assert builder._conditions == [
            "WHERE age >= ?",
            "AND active = ?",
            "AND country = ?",
            "OR role = ?",
        ]
        result = builder.build()
        assert result.query == "SELECT * FROM users WHERE age >= ? AND active = ? AND country = ? OR role = ?"
        assert result.params == [18, 1, "PT", "admin"]

    def test_in_variants(self) -> None:
        result = (
            StatementBuilder("users")
            .select()
            .where_in("id", [1, 2])
            .and_in("status", ["new", "active", "paused"])
            .or_in("role", ["admin"])
            .build()
        )

        assert result.query == (
            "SELECT * FROM users WHERE id IN (?,?) AND status IN (?,?,?) OR role IN (?)"
        )
        assert result.params == [1, 2, "new", "active", "paused", "admin"]

    def test_mixed_plain_and_in(self) -> None:
        result = StatementBuilder("users").select().where("age", 21, ">").and_in("id", [4, 5]).build()

        assert result.query == "SELECT * FROM users WHERE age > ? AND id IN (?,?)"
        assert result.params == [21, 4, 5]

    @pytest.mark.parametrize("method", ["and_", "or_"])
    def test_and_or_before_where_rejected(self, method: str) -> None:
        builder = StatementBuilder("users").select()

        with pytest.raises(InvalidOperationError, match="before WHERE"):
            getattr(builder, method)("id", 1)

    @pytest.mark.parametrize("method", ["and_in", "or_in"])
    def test_and_or_in_before_where_rejected(self, method: str) -> None:
        builder = StatementBuilder("users").select()

        with pytest.raises(InvalidOperationError, match="before WHERE"):
            getattr(builder, method)("id", [1, 2])

    @pytest.mark.parametrize("method", ["where_in", "and_in", "or_in"])
    def test_empty_in_values_rejected(self, method: str) -> None:
        """Test an empty IN list is rejected instead of rendering ``IN ()``."""
        builder = StatementBuilder("users").select().where("active", 1)

        with pytest.raises(InvalidOperationError, match="at least one value"):
            getattr(builder, method)("id", [])

        assert "IN ()" not in builder.to_sql()
        assert builder.params == [1]


class TestConditionGroupReplacement:
    """Calling ``where``/``where_in`` again replaces the whole condition group."""

    def test_where_replaces_previous_group(self) -> None:
        builder = StatementBuilder("users").select().where("age", 18, ">").and_("active", 1)

        builder.where("id", 42)
        result = builder.build()

        assert result.query == "SELECT * FROM users WHERE id = ?"
        assert result.params == [42]

    def test_where_in_replaces_previous_group(self) -> None:
        builder = StatementBuilder("users").delete().where("id", 1).or_("id", 2)

        builder.where_in("email", ["a@x", "b@x"])
        result = builder.build()

        assert result.query == "DELETE FROM users WHERE email IN (?,?)"
        assert result.params == ["a@x", "b@x"]

    def test_replacement_keeps_main_clause_params(self) -> None:
        """Test replacement drops only condition params, not the SET params before them."""
        builder = StatementBuilder("users").update({"name": "Ana", "age": 31})
        builder.where("id", 1).and_in("team", [3, 4, 5])

        builder.where("id", 2)

        assert builder.params == ["Ana", 31, 2]
        result = builder.build()
        assert result.query == "UPDATE users SET name = ?, age = ? WHERE id = ?"
        assert result.params == ["Ana", 31, 2]

    def test_and_after_replacement_appends_to_new_group(self) -> None:
        builder = StatementBuilder("users").select().where("a", 1).and_("b", 2)

        builder.where_in("c", [3]).and_("d", 4)

        assert builder.build().query == "SELECT * FROM users WHERE c IN (?) AND d = ?"
        assert builder.params == [3, 4]
