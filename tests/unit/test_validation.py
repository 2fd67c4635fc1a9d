"""Tests for placeholder counting and statement validation."""

import pytest

from sqlchain.validation import ValidationResult, count_placeholders, validate_statement


@pytest.mark.parametrize(
    ("sql", "expected"),
    [
        ("SELECT * FROM users", 0),
        ("SELECT * FROM users WHERE id = ?", 1),
        ("INSERT INTO users (a,b,c) VALUES (?,?,?)", 3),
        ("SELECT * FROM faq WHERE question = 'why?' AND id = ?", 1),
        ("UPDATE users SET note = ? WHERE id IN (?,?)", 3),
    ],
)
def test_count_placeholders(sql: str, expected: int) -> None:
    assert count_placeholders(sql) == expected


def test_validate_statement_valid() -> None:
    result = validate_statement("SELECT id FROM users WHERE age > ? ORDER BY id DESC LIMIT 10")

    assert result.is_valid
    assert bool(result) is True
    assert result.issues == []


def test_validate_statement_invalid() -> None:
    result = validate_statement("SELECT (id FROM users")

    assert not result
    assert result.issues
    assert result.issues[0].startswith("SQL parsing failed")


@pytest.mark.parametrize("sql", ["", "   "])
def test_validate_statement_empty(sql: str) -> None:
    result = validate_statement(sql)

    assert not result.is_valid
    assert result.issues == ["Statement is empty"]


def test_validation_result_repr() -> None:
    assert repr(ValidationResult(True, "SELECT 1")) == "ValidationResult(is_valid=True, issues=[])"
