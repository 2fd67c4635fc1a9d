"""Fluent builder for parameterized SQL statements.

The factory helpers return a :class:`StatementBuilder` that already has its
statement kind set, so the table is named once and clauses follow directly::

    from sqlchain.builder import select

    statement = select("users", "id", "name").where("age", 18, ">").build()
"""

from collections.abc import Mapping
from typing import Any, Optional

from sqlchain.builder._base import BuiltStatement, StatementKind
from sqlchain.builder._statement import StatementBuilder
from sqlchain.config import BuilderConfig

__all__ = (
    "BuiltStatement",
    "StatementBuilder",
    "StatementKind",
    "delete",
    "insert",
    "select",
    "update",
)


def select(table: str, *columns: str, config: Optional[BuilderConfig] = None) -> StatementBuilder:
    """Create a SELECT builder.

    Args:
        table: The table to select from.
        *columns: Optional columns to select. If not provided, selects all columns.
        config: Optional builder configuration.

    Returns:
        StatementBuilder: A new builder in SELECT mode.
    """
    return StatementBuilder(table, config=config).select(columns or ("*",))


def insert(table: str, values: Mapping[str, Any], config: Optional[BuilderConfig] = None) -> StatementBuilder:
    """Create an INSERT builder for one row.

    Returns:
        StatementBuilder: A new builder in INSERT mode.
    """
    return StatementBuilder(table, config=config).insert(values)


def update(table: str, values: Mapping[str, Any], config: Optional[BuilderConfig] = None) -> StatementBuilder:
    """Create an UPDATE builder.

    Returns:
        StatementBuilder: A new builder in UPDATE mode.
    """
    return StatementBuilder(table, config=config).update(values)


def delete(table: str, config: Optional[BuilderConfig] = None) -> StatementBuilder:
    """Create a DELETE builder.

    Returns:
        StatementBuilder: A new builder in DELETE mode.
    """
    return StatementBuilder(table, config=config).delete()
