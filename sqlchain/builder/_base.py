"""Statement kinds and the built statement result type."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from sqlchain.validation import count_placeholders

__all__ = (
    "BuiltStatement",
    "StatementKind",
)


class StatementKind(Enum):
    """SQL operation category a builder is fixed to."""

    UNSET = "UNSET"
    INSERT = "INSERT"
    SELECT = "SELECT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"

    def __str__(self) -> str:
        return self.value


@dataclass
class BuiltStatement:
    """A rendered SQL statement with its positional bind parameters.

    ``params[i]`` binds to the ``i``-th ``?`` placeholder in ``query``.
    """

    query: str
    params: list[Any] = field(default_factory=list)

    @property
    def placeholder_count(self) -> int:
        """Number of positional placeholders in ``query``."""
        return count_placeholders(self.query)

    def as_dict(self) -> dict[str, Any]:
        """Return the statement as a ``{"query": ..., "params": ...}`` mapping.

        Returns:
            dict[str, Any]: A new dictionary holding a copy of the params.
        """
        return {"query": self.query, "params": list(self.params)}

    def __iter__(self) -> Iterator[Any]:
        """Unpack as ``(query, params)``, e.g. ``cursor.execute(*statement)``."""
        yield self.query
        yield list(self.params)

    def __str__(self) -> str:
        return self.query
