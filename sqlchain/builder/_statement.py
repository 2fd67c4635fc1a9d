"""Fluent builder for parameterized INSERT, SELECT, UPDATE and DELETE statements.

A builder is bound to one table and one statement. The first call to
``insert``/``select``/``update``/``delete`` fixes the statement kind, which
decides the clauses that may follow. Values are never rendered into the text;
each one becomes a positional ``?`` placeholder and is staged on the builder
in rendering order.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Optional, Union

from typing_extensions import Self

from sqlchain.builder._base import BuiltStatement, StatementKind
from sqlchain.config import BuilderConfig
from sqlchain.exceptions import InvalidOperationError, ParameterMismatchError, SQLParsingError
from sqlchain.utils.logging import get_logger, log_with_context
from sqlchain.validation import count_placeholders, validate_statement

__all__ = ("StatementBuilder",)

logger = get_logger("builder")

_ORDER_DIRECTIONS = frozenset({"ASC", "DESC"})


class StatementBuilder:
    """Builder for a single parameterized SQL statement.

    Every clause method mutates the builder and returns it, so calls chain::

        statement = (
            StatementBuilder("users")
            .select(["id", "name"])
            .where("age", 18, ">")
            .and_("active", 1)
            .order("name", "desc")
            .limit(10)
            .build()
        )

    Calling ``where`` or ``where_in`` a second time starts a new condition
    group: the previous WHERE/AND/OR fragments and their parameters are
    discarded.

    Instances are not safe for concurrent mutation.
    """

    __slots__ = (
        "_condition_params",
        "_conditions",
        "_config",
        "_joins",
        "_kind",
        "_limit",
        "_main",
        "_main_params",
        "_order",
        "_statement",
        "_table",
    )

    def __init__(self, table: str, config: Optional[BuilderConfig] = None) -> None:
        """Create a builder targeting ``table``.

        Args:
            table: Name of the table the statement addresses.
            config: Optional builder configuration.

        Raises:
            InvalidOperationError: If the table name is empty.
        """
        if not table or not table.strip():
            msg = "Table name must not be empty."
            raise InvalidOperationError(msg)
        self._table = table
        self._config = config if config is not None else BuilderConfig()
        self._kind = StatementKind.UNSET
        self._main = ""
        self._main_params: list[Any] = []
        self._joins: list[str] = []
        self._conditions: list[str] = []
        self._condition_params: list[Any] = []
        self._order: list[str] = []
        self._limit: Optional[str] = None
        self._statement: Optional[BuiltStatement] = None

    @property
    def table(self) -> str:
        return self._table

    @property
    def kind(self) -> StatementKind:
        return self._kind

    @property
    def config(self) -> BuilderConfig:
        return self._config

    @property
    def params(self) -> list[Any]:
        """Staged parameters in placeholder order: main clause first, then conditions."""
        return [*self._main_params, *self._condition_params]

    @property
    def statement(self) -> Optional[BuiltStatement]:
        """The result of the last successful :meth:`build`, if any."""
        return self._statement

    def _set_kind(self, kind: StatementKind) -> None:
        if self._kind is not StatementKind.UNSET:
            msg = f"Statement kind is already {self._kind}; cannot start a {kind} statement on the same builder."
            raise InvalidOperationError(msg)
        self._kind = kind
        logger.debug("Building %s statement for table %s", kind, self._table)

    def _require_select(self, clause: str) -> None:
        if self._kind is not StatementKind.SELECT:
            msg = f"Cannot use {clause} outside a SELECT statement."
            raise InvalidOperationError(msg)

    def _forbid_insert(self) -> None:
        if self._kind is StatementKind.INSERT:
            msg = "Cannot use conditions inside an INSERT statement."
            raise InvalidOperationError(msg)

    def _require_condition_group(self) -> None:
        if not self._conditions:
            msg = "Cannot use AND/OR before WHERE."
            raise InvalidOperationError(msg)

    @staticmethod
    def _in_placeholders(values: Iterable[Any]) -> tuple[str, list[Any]]:
        staged = list(values)
        if not staged:
            msg = "IN conditions require at least one value."
            raise InvalidOperationError(msg)
        return ",".join("?" * len(staged)), staged

    @staticmethod
    def _mapping_items(values: Mapping[str, Any], statement: str) -> tuple[list[str], list[Any]]:
        if not values:
            msg = f"{statement} requires at least one column value."
            raise InvalidOperationError(msg)
        return list(values.keys()), list(values.values())

    def insert(self, values: Mapping[str, Any]) -> Self:
        """Start an INSERT of one row.

        Args:
            values: Column to value mapping; iteration order decides column order.

        Raises:
            InvalidOperationError: If the statement kind is already set, ``values`` is empty
                or conditions were staged before the kind was chosen.

        Returns:
            The current builder instance for method chaining.
        """
        columns, params = self._mapping_items(values, "INSERT")
        if self._conditions:
            msg = "Cannot use conditions inside an INSERT statement."
            raise InvalidOperationError(msg)
        self._set_kind(StatementKind.INSERT)
        placeholders = ",".join("?" * len(params))
        self._main = f"INSERT INTO {self._table} ({','.join(columns)}) VALUES ({placeholders})"
        self._main_params = params
        return self

    def select(self, columns: Union[str, Sequence[str]] = ("*",)) -> Self:
        """Start a SELECT.

        Args:
            columns: Columns to select. A bare string selects a single column.

        Raises:
            InvalidOperationError: If the statement kind is already set or no columns are given.

        Returns:
            The current builder instance for method chaining.
        """
        selected = [columns] if isinstance(columns, str) else list(columns)
        if not selected:
            msg = "SELECT requires at least one column."
            raise InvalidOperationError(msg)
        self._set_kind(StatementKind.SELECT)
        self._main = f"SELECT {','.join(selected)} FROM {self._table}"
        return self

    def update(self, values: Mapping[str, Any]) -> Self:
        """Start an UPDATE.

        Args:
            values: Column to value mapping rendered as ``col = ?`` assignments.

        Raises:
            InvalidOperationError: If the statement kind is already set or ``values`` is empty.

        Returns:
            The current builder instance for method chaining.
        """
        columns, params = self._mapping_items(values, "UPDATE")
        self._set_kind(StatementKind.UPDATE)
        assignments = ", ".join(f"{column} = ?" for column in columns)
        self._main = f"UPDATE {self._table} SET {assignments}"
        self._main_params = params
        return self

    def delete(self) -> Self:
        """Start a DELETE.

        Returns:
            The current builder instance for method chaining.
        """
        self._set_kind(StatementKind.DELETE)
        self._main = f"DELETE FROM {self._table}"
        return self

    def where(self, column: str, value: Any, operator: str = "=") -> Self:
        """Start a new condition group with ``WHERE column operator ?``.

        Any previous condition group and its parameters are discarded.

        Raises:
            InvalidOperationError: On an INSERT statement.

        Returns:
            The current builder instance for method chaining.
        """
        self._forbid_insert()
        self._conditions = [f"WHERE {column} {operator} ?"]
        self._condition_params = [value]
        return self

    def and_(self, column: str, value: Any, operator: str = "=") -> Self:
        """Append ``AND column operator ?`` to the current condition group.

        Raises:
            InvalidOperationError: If no ``where`` has been called.

        Returns:
            The current builder instance for method chaining.
        """
        self._require_condition_group()
        self._conditions.append(f"AND {column} {operator} ?")
        self._condition_params.append(value)
        return self

    def or_(self, column: str, value: Any, operator: str = "=") -> Self:
        """Append ``OR column operator ?`` to the current condition group.

        Raises:
            InvalidOperationError: If no ``where`` has been called.

        Returns:
            The current builder instance for method chaining.
        """
        self._require_condition_group()
        self._conditions.append(f"OR {column} {operator} ?")
        self._condition_params.append(value)
        return self

    def where_in(self, column: str, values: Iterable[Any]) -> Self:
        """Start a new condition group with ``WHERE column IN (?,...)``.

        Raises:
            InvalidOperationError: On an INSERT statement or when ``values`` is empty.

        Returns:
            The current builder instance for method chaining.
        """
        self._forbid_insert()
        placeholders, staged = self._in_placeholders(values)
        self._conditions = [f"WHERE {column} IN ({placeholders})"]
        self._condition_params = staged
        return self

    def and_in(self, column: str, values: Iterable[Any]) -> Self:
        """Append ``AND column IN (?,...)`` to the current condition group.

        Raises:
            InvalidOperationError: If no ``where`` has been called or ``values`` is empty.

        Returns:
            The current builder instance for method chaining.
        """
        self._require_condition_group()
        placeholders, staged = self._in_placeholders(values)
        self._conditions.append(f"AND {column} IN ({placeholders})")
        self._condition_params.extend(staged)
        return self

    def or_in(self, column: str, values: Iterable[Any]) -> Self:
        """Append ``OR column IN (?,...)`` to the current condition group.

        Raises:
            InvalidOperationError: If no ``where`` has been called or ``values`` is empty.

        Returns:
            The current builder instance for method chaining.
        """
        self._require_condition_group()
        placeholders, staged = self._in_placeholders(values)
        self._conditions.append(f"OR {column} IN ({placeholders})")
        self._condition_params.extend(staged)
        return self

    def join(
        self,
        table: str,
        left_column: str,
        right_column: str,
        operator: str = "=",
        join_type: str = "INNER",
    ) -> Self:
        """Add a JOIN clause.

        Args:
            table: The table to join.
            left_column: Left-hand column of the ON condition.
            right_column: Right-hand column of the ON condition.
            operator: Comparison operator of the ON condition.
            join_type: The type of JOIN (INNER, LEFT, RIGHT).

        Raises:
            InvalidOperationError: Outside a SELECT statement.

        Returns:
            The current builder instance for method chaining.
        """
        self._require_select("JOIN")
        self._joins.append(f"{join_type} JOIN {table} ON {left_column} {operator} {right_column}")
        return self

    def left_join(self, table: str, left_column: str, right_column: str, operator: str = "=") -> Self:
        return self.join(table, left_column, right_column, operator, "LEFT")

    def right_join(self, table: str, left_column: str, right_column: str, operator: str = "=") -> Self:
        return self.join(table, left_column, right_column, operator, "RIGHT")

    def inner_join(self, table: str, left_column: str, right_column: str, operator: str = "=") -> Self:
        return self.join(table, left_column, right_column, operator, "INNER")

    def order(self, column: str, direction: str = "asc") -> Self:
        """Append an ORDER BY term.

        Args:
            column: Column to sort by.
            direction: ``asc`` or ``desc``, case-insensitive.

        Raises:
            InvalidOperationError: Outside a SELECT statement or for an unknown direction.

        Returns:
            The current builder instance for method chaining.
        """
        self._require_select("ORDER BY")
        normalized = direction.upper()
        if normalized not in _ORDER_DIRECTIONS:
            msg = f"Invalid ORDER BY direction: {direction!r}"
            raise InvalidOperationError(msg)
        self._order.append(f"{column} {normalized}")
        return self

    def limit(self, limit: int) -> Self:
        """Set the LIMIT clause. The last call wins.

        Raises:
            InvalidOperationError: Outside a SELECT statement or for a non-integer or negative limit.

        Returns:
            The current builder instance for method chaining.
        """
        self._require_select("LIMIT")
        if isinstance(limit, bool) or not isinstance(limit, int):
            msg = f"LIMIT must be an integer, got {type(limit).__name__}"
            raise InvalidOperationError(msg)
        if limit < 0:
            msg = f"LIMIT must not be negative, got {limit}"
            raise InvalidOperationError(msg)
        self._limit = f"LIMIT {limit}"
        return self

    def to_sql(self) -> str:
        """Render the statement text for the current state without validating it.

        Returns:
            str: The assembled SQL text.
        """
        parts = [self._main]
        if self._joins:
            parts.append(" ".join(self._joins))
        if self._conditions:
            parts.append(" ".join(self._conditions))
        if self._order:
            parts.append("ORDER BY " + ",".join(self._order))
        if self._limit:
            parts.append(self._limit)
        return " ".join(parts)

    def build(self) -> BuiltStatement:
        """Build the final statement and check placeholders against parameters.

        Raises:
            InvalidOperationError: If no statement kind has been chosen.
            ParameterMismatchError: If the placeholder count differs from the staged parameters.
            SQLParsingError: If validation is enabled and the statement does not parse.

        Returns:
            BuiltStatement: The SQL text and its positional parameters.
        """
        if self._kind is StatementKind.UNSET:
            msg = "No statement to build; call insert(), select(), update() or delete() first."
            raise InvalidOperationError(msg)

        sql = self.to_sql()
        params = self.params
        placeholder_count = count_placeholders(sql)
        if placeholder_count != len(params):
            logger.debug("Placeholder mismatch in %s statement: %d != %d", self._kind, placeholder_count, len(params))
            raise ParameterMismatchError(placeholder_count, len(params), sql)

        if self._config.enable_validation:
            result = validate_statement(sql)
            if not result:
                msg = "; ".join(result.issues)
                raise SQLParsingError(msg)

        self._statement = BuiltStatement(query=sql, params=params)
        log_with_context(
            logger,
            logging.DEBUG,
            "Built statement",
            kind=str(self._kind),
            table=self._table,
            placeholders=placeholder_count,
        )
        return self._statement

    def __str__(self) -> str:
        return self.build().query

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(table={self._table!r}, kind={self._kind.name})"
