"""List and header rewrite rules.

This module converts line-initial list marker runs and ``hN.`` headers.
The list rule must run before the header rule so Markdown ``#`` headers
produced here are never read back as ordered list markers.
"""

from __future__ import annotations

import re

from core.constants import (
    FIRST_LEVEL_LIST_INDENT,
    NESTED_LIST_INDENT_STEP,
    ORDERED_LIST_MARKER,
    UNORDERED_LIST_MARKER,
)

_LIST_ITEM_PATTERN = re.compile(r"^([#*+-]+) (.*)$", re.MULTILINE)
_HEADER_PATTERN = re.compile(r"^h([0-6])\.(.*)$", re.MULTILINE)


def convert_lists(text: str) -> str:
    """Rewrite multi-level list items into indented Markdown items.

    The last character of the marker run selects the family: ``#`` is an
    ordered item, ``-``, ``+`` and ``*`` are unordered items. The run
    length selects the indent.

    Args:
        text: Document text.

    Returns:
        Text with list lines rewritten to ``<indent><marker> <content>``.
    """
    return _LIST_ITEM_PATTERN.sub(_render_list_item, text)


def convert_headers(text: str) -> str:
    """Rewrite ``hN.`` headers into ``N + 1`` Markdown hashes.

    Args:
        text: Document text.

    Returns:
        Text where ``h1.`` becomes ``##`` and ``h6.`` becomes ``#######``.
    """
    return _HEADER_PATTERN.sub(_render_header, text)


def list_indent_width(run_length: int) -> int:
    """Compute the indent width for a marker run of the given length.

    Args:
        run_length: Number of marker characters, at least 1.

    Returns:
        2 for a top-level item, ``(run_length - 1) * 4 + 2`` otherwise.
    """
    if run_length <= 1:
        return FIRST_LEVEL_LIST_INDENT
    return (run_length - 1) * NESTED_LIST_INDENT_STEP + FIRST_LEVEL_LIST_INDENT


def _render_list_item(match: re.Match[str]) -> str:
    run = match.group(1)
    marker = ORDERED_LIST_MARKER if run[-1] == "#" else UNORDERED_LIST_MARKER
    indent = " " * list_indent_width(len(run))
    return f"{indent}{marker} {match.group(2)}"


def _render_header(match: re.Match[str]) -> str:
    level = int(match.group(1)) + 1
    return "#" * level + match.group(2)
