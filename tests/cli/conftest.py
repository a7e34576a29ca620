"""Shared fixtures for CLI tests."""

from collections.abc import Iterator
from unittest.mock import patch

import pytest
import structlog
from structlog.testing import LogCapture


@pytest.fixture
def log_capture() -> LogCapture:
    return LogCapture()


@pytest.fixture(autouse=True)
def _silence_structlog(log_capture: LogCapture) -> Iterator[None]:
    """Route CLI logging into a LogCapture so command output stays clean."""

    def _configure(log_format: str) -> None:
        structlog.configure(processors=[log_capture])

    with patch("minutes_judge.cli.main._configure_structlog", new=_configure):
        yield
    structlog.reset_defaults()
