"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def clean_jiramd_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear jiramd environment variables so config defaults apply."""
    for name in (
        "JIRAMD_CHARSET",
        "JIRAMD_STRIKETHROUGH",
        "JIRAMD_LOG_LEVEL",
        "JIRAMD_S3_REGION",
        "JIRAMD_S3_PROFILE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def write_markup(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes markup encoded with a given charset."""

    def _write(text: str, name: str = "page.jira", charset: str = "utf-8") -> Path:
        markup_path = tmp_path / name
        markup_path.write_bytes(text.encode(charset))
        return markup_path

    return _write
