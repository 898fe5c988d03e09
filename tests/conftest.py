"""Shared pytest fixtures."""

import logging
from pathlib import Path
from typing import Callable

import pytest
import structlog

from struct2schema.logging.handlers import LOGGER_NAME

USER_SOURCE = """package models

// User is a registered account.
// @struct2schema
type User struct {
	ID   int
	Name string
}
"""


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logging configuration done by CLI invocations."""
    yield
    structlog.reset_defaults()
    package_logger = logging.getLogger(LOGGER_NAME)
    for handler in package_logger.handlers:
        handler.close()
    package_logger.handlers.clear()


@pytest.fixture
def write_go(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write Go source into a temporary file and return its path."""

    def _write(source: str, name: str = "models.go") -> Path:
        path = tmp_path / name
        path.write_text(source, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def user_file(write_go) -> Path:
    return write_go(USER_SOURCE, "user.go")
