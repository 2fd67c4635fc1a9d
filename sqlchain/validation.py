"""Placeholder counting and syntax validation for assembled statements.

Both helpers work on the rendered SQL text using sqlglot's tokenizer and
parser, so a ``?`` inside a quoted literal or comment is never mistaken for
a bind placeholder.
"""

from typing import Optional

import sqlglot
from sqlglot.errors import ParseError, TokenError
from sqlglot.tokens import Tokenizer, TokenType

from sqlchain.exceptions import SQLParsingError

__all__ = (
    "ValidationResult",
    "count_placeholders",
    "validate_statement",
)


class ValidationResult:
    """Result of statement validation."""

    __slots__ = ("is_valid", "issues", "sql")

    def __init__(self, is_valid: bool, sql: str, issues: Optional[list[str]] = None) -> None:
        self.is_valid = is_valid
        self.sql = sql
        self.issues = issues if issues is not None else []

    def __bool__(self) -> bool:
        return self.is_valid

    def __repr__(self) -> str:
        return f"ValidationResult(is_valid={self.is_valid!r}, issues={self.issues!r})"


def count_placeholders(sql: str) -> int:
    """Count positional ``?`` placeholders in a SQL string.

    Args:
        sql: The SQL text to scan.

    Raises:
        SQLParsingError: If the text cannot be tokenized.

    Returns:
        int: The number of placeholder tokens.
    """
    if "?" not in sql:
        return 0
    try:
        tokens = Tokenizer().tokenize(sql)
    except TokenError as e:
        msg = f"SQL tokenizing failed: {e}"
        raise SQLParsingError(msg) from e
    return sum(1 for token in tokens if token.token_type == TokenType.PLACEHOLDER)


def validate_statement(sql: str) -> ValidationResult:
    """Parse a statement and report whether it is well formed.

    Args:
        sql: The SQL text to validate.

    Returns:
        ValidationResult: ``is_valid`` is False when sqlglot cannot parse the text.
    """
    if not sql or not sql.strip():
        return ValidationResult(False, sql, ["Statement is empty"])
    try:
        sqlglot.parse_one(sql)
    except (ParseError, TokenError) as e:
        return ValidationResult(False, sql, [f"SQL parsing failed: {e}"])
    return ValidationResult(True, sql)
