"""Builder configuration."""

from dataclasses import dataclass, fields, replace
from typing import Any

from sqlchain.exceptions import ImproperConfigurationError

__all__ = ("BuilderConfig",)


@dataclass(frozen=True)
class BuilderConfig:
    """Configuration for StatementBuilder behavior."""

    enable_validation: bool = False
    """Whether to parse the built statement with sqlglot and reject invalid SQL."""

    def __post_init__(self) -> None:
        if not isinstance(self.enable_validation, bool):
            msg = f"enable_validation must be a bool, got {type(self.enable_validation).__name__}"
            raise ImproperConfigurationError(msg)

    def replace(self, **changes: Any) -> "BuilderConfig":
        """Return a copy of this config with the given fields replaced.

        Args:
            **changes: Field values to override.

        Raises:
            ImproperConfigurationError: If an unknown field name is passed.

        Returns:
            BuilderConfig: The modified copy.
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(changes) - known)
        if unknown:
            msg = f"Unknown BuilderConfig field(s): {', '.join(unknown)}"
            raise ImproperConfigurationError(msg)
        return replace(self, **changes)
