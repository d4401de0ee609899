"""Unit tests for structured logging configuration."""

from __future__ import annotations

import json
from typing import Iterator

import pytest

from core.logging_config import configure_logging, get_logger


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Restore the default level after each test."""
    yield
    configure_logging()


def test_configure_logging_renders_json_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    """Events at or above the level should be JSON lines on stderr."""
    configure_logging("INFO")

    get_logger("jiramd.test").info("markup_converted", input_chars=3)
    captured = capsys.readouterr()
    payload = json.loads(captured.err.strip())

    assert (
        captured.out == ""
        and payload["event"] == "markup_converted"
        and payload["input_chars"] == 3
        and payload["level"] == "info"
    )


def test_configure_logging_filters_lower_levels(capsys: pytest.CaptureFixture[str]) -> None:
    """Events below the configured level should be dropped."""
    configure_logging("WARNING")

    get_logger("jiramd.test").info("rule_applied", rule="strong")

    assert capsys.readouterr().err == ""
