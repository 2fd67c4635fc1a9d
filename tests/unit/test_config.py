"""Tests for BuilderConfig."""

import pytest

from sqlchain.config import BuilderConfig
from sqlchain.exceptions import ImproperConfigurationError


def test_defaults() -> None:
    assert BuilderConfig().enable_validation is False


def test_replace_returns_copy() -> None:
    config = BuilderConfig()

    updated = config.replace(enable_validation=True)

    assert updated.enable_validation is True
    assert config.enable_validation is False


def test_replace_unknown_field() -> None:
    with pytest.raises(ImproperConfigurationError, match="strict"):
        BuilderConfig().replace(strict=True)


def test_non_bool_validation_flag() -> None:
    with pytest.raises(ImproperConfigurationError, match="enable_validation"):
        BuilderConfig(enable_validation="yes")  # type: ignore[arg-type]


def test_config_is_frozen() -> None:
    config = BuilderConfig()

    with pytest.raises(AttributeError):
        config.enable_validation = True  # type: ignore[misc]
