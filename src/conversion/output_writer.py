"""Markdown output emission.

This module prints converted Markdown to stdout or writes it to a file.
"""

from __future__ import annotations

from pathlib import Path

from core.errors import JiraMdWriteError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def write_markdown(markdown: str, output_path: Path | None = None) -> Path | None:
    """Emit converted Markdown.

    Args:
        markdown: Converted Markdown text.
        output_path: Destination file; stdout when omitted.

    Returns:
        The written path, or None when printed to stdout.

    Raises:
        JiraMdWriteError: If the file cannot be written.
    """
    if output_path is None:
        print(markdown)
        return None
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(markdown, encoding="utf-8")
    except OSError as error:
        raise JiraMdWriteError(
            f"Failed to write Markdown to {output_path}: {error}. "
            "Check the output directory and permissions."
        ) from error
    _LOGGER.info("markdown_written", output_path=str(output_path), chars=len(markdown))
    return output_path
