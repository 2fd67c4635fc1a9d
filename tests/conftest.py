from __future__ import annotations

import logging
from collections.abc import Generator

import pytest


@pytest.fixture
def sqlchain_logger() -> Generator[logging.Logger, None, None]:
    """Yield the root ``sqlchain`` logger and restore its state afterwards."""
    logger = logging.getLogger("sqlchain")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
