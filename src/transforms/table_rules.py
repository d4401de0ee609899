"""Table header rewrite rule.

This module is the one line-oriented rule: it splits the document into
lines, rewrites ``||`` header rows, and synthesizes the Markdown
separator row that Jira markup has no equivalent for.
"""

from __future__ import annotations

import re

from core.constants import (
    TABLE_CELL_DELIMITER,
    TABLE_HEADER_DELIMITER,
    TABLE_SEPARATOR_SEGMENT,
)

_LINE_BREAK_PATTERN = re.compile(r"\r?\n")


def convert_table_headers(text: str) -> str:
    """Rewrite ``||`` header rows and insert a separator row after each.

    Lines are split on ``\\r?\\n`` and joined back with ``\\n``.

    Args:
        text: Document text.

    Returns:
        Text where ``||A||B||`` becomes ``|A|B|`` followed by ``|---|---|``.
    """
    output_lines: list[str] = []
    for line in _LINE_BREAK_PATTERN.split(text):
        if TABLE_HEADER_DELIMITER not in line:
            output_lines.append(line)
            continue
        output_lines.append(line.replace(TABLE_HEADER_DELIMITER, TABLE_CELL_DELIMITER))
        output_lines.append(build_separator_row(count_header_columns(line)))
    return "\n".join(output_lines)


def count_header_columns(line: str) -> int:
    """Count ``||``-separated pieces of a header row.

    Trailing empty pieces are not counted, so ``||A||B||`` yields 3: the
    leading empty piece plus one per cell.

    Args:
        line: Header row text.

    Returns:
        Number of pieces.
    """
    pieces = line.split(TABLE_HEADER_DELIMITER)
    while pieces and not pieces[-1]:
        pieces.pop()
    return len(pieces)


def build_separator_row(column_count: int) -> str:
    """Build a ``|---|...|`` row with ``column_count - 1`` segments."""
    return TABLE_SEPARATOR_SEGMENT * max(column_count - 1, 0) + TABLE_CELL_DELIMITER
