from typing import Any, Optional

__all__ = (
    "ImproperConfigurationError",
    "InvalidOperationError",
    "ParameterError",
    "ParameterMismatchError",
    "SQLBuilderError",
    "SQLChainError",
    "SQLParsingError",
)


class SQLChainError(Exception):
    """Base exception class from which all sqlchain exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``SQLChainError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class ImproperConfigurationError(SQLChainError):
    """Improper Configuration error.

    Raised when a configuration value or logging setting cannot be used.
    """


class SQLBuilderError(SQLChainError):
    """Issues Building or Generating SQL statements."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Issues building SQL statement."
        super().__init__(message)


class InvalidOperationError(SQLBuilderError):
    """A builder method was called in a state that forbids it.

    Raised for clauses that do not apply to the current statement kind
    (``limit`` on an UPDATE, ``where`` on an INSERT), for ``and_``/``or_``
    before any ``where``, and for degenerate input such as an empty IN list.
    """

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Operation is not valid for the current statement."
        super().__init__(message)


class SQLParsingError(SQLChainError):
    """Issues parsing SQL statements."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Issues parsing SQL statement."
        super().__init__(message)


class ParameterError(SQLChainError):
    """Base class for parameter-related errors."""

    sql: Optional[str]

    def __init__(self, message: str, sql: Optional[str] = None) -> None:
        """Initialize with optional SQL context."""
        detail_message = message
        if sql:
            detail_message = f"{message}\nSQL: {sql}"
        super().__init__(detail=detail_message)
        self.sql = sql


class ParameterMismatchError(ParameterError):
    """Raised when the placeholder count does not match the staged parameters."""

    expected: int
    actual: int

    def __init__(self, expected: int, actual: int, sql: Optional[str] = None) -> None:
        """Initialize with the placeholder and parameter counts.

        Args:
            expected: Number of placeholders found in the statement.
            actual: Number of parameters staged on the builder.
            sql: The assembled statement text.
        """
        message = f"Invalid number of query parameters: statement has {expected} placeholder(s), got {actual}"
        super().__init__(message, sql)
        self.expected = expected
        self.actual = actual
