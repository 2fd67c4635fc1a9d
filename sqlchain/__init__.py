"""sqlchain: fluent construction of parameterized SQL statements."""

from sqlchain import builder, exceptions, utils, validation
from sqlchain.__metadata__ import __version__
from sqlchain.builder import BuiltStatement, StatementBuilder, StatementKind, delete, insert, select, update
from sqlchain.config import BuilderConfig
from sqlchain.exceptions import (
    ImproperConfigurationError,
    InvalidOperationError,
    ParameterError,
    ParameterMismatchError,
    SQLBuilderError,
    SQLChainError,
    SQLParsingError,
)

__all__ = (
    "BuilderConfig",
    "BuiltStatement",
    "ImproperConfigurationError",
    "InvalidOperationError",
    "ParameterError",
    "ParameterMismatchError",
    "SQLBuilderError",
    "SQLChainError",
    "SQLParsingError",
    "StatementBuilder",
    "StatementKind",
    "__version__",
    "builder",
    "delete",
    "exceptions",
    "insert",
    "select",
    "update",
    "utils",
    "validation",
)
