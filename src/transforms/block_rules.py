"""Block-level rewrite rules.

This module converts quote lines, quote blocks, code and no-format
blocks, and color spans. Block patterns match across line breaks and
stop at the nearest closing marker.
"""

from __future__ import annotations

import re

from core.constants import CODE_FENCE, QUOTE_PREFIX

_BLOCK_QUOTE_LINE_PATTERN = re.compile(r"^bq\.(.*)$", re.MULTILINE)
_CODE_BLOCK_PATTERN = re.compile(r"\{code(?::([a-z]+))?\}(.*?)\{code\}", re.DOTALL)
_QUOTE_BLOCK_PATTERN = re.compile(r"\{quote\}(.*?)\{quote\}", re.DOTALL)
_COLOR_PATTERN = re.compile(r"\{color:([^}]+)\}(.*?)\{color\}", re.DOTALL)
_LEADING_BREAK_PATTERN = re.compile(r"\A\r?\n")
_TRAILING_BREAK_PATTERN = re.compile(r"\r?\n\Z")
_LINE_BREAK_PATTERN = re.compile(r"\r?\n")
_NOFORMAT_MARKER = "{noformat}"


def convert_block_quote_lines(text: str) -> str:
    """Rewrite lines starting with ``bq.`` into Markdown quote lines.

    Only the ``bq.`` prefix is replaced; the remainder of the line is kept
    verbatim, including its leading space.

    Args:
        text: Document text.

    Returns:
        Text with ``bq.`` lines prefixed by ``> ``.
    """
    return _BLOCK_QUOTE_LINE_PATTERN.sub(lambda match: QUOTE_PREFIX + match.group(1), text)


def convert_code_blocks(text: str) -> str:
    """Rewrite ``{code[:lang]}...{code}`` into a fenced block.

    The language tag and content are concatenated inside the fences
    exactly as captured, with no inserted line break.

    Args:
        text: Document text.

    Returns:
        Text with code blocks fenced by triple backticks.
    """
    return _CODE_BLOCK_PATTERN.sub(_render_code_block, text)


def convert_quote_blocks(text: str) -> str:
    """Rewrite ``{quote}...{quote}`` into prefixed Markdown quote lines.

    One line break right after the opening marker and one right before
    the closing marker belong to the markers and are dropped.
    Trailing empty lines inside the block are dropped as well.

    Args:
        text: Document text.

    Returns:
        Text with each quoted line prefixed by ``> `` and markers removed.
    """
    return _QUOTE_BLOCK_PATTERN.sub(_render_quote_block, text)


def convert_noformat_blocks(text: str) -> str:
    """Replace every ``{noformat}`` marker with a code fence."""
    return text.replace(_NOFORMAT_MARKER, CODE_FENCE)


def convert_color_spans(text: str) -> str:
    """Rewrite ``{color:spec}...{color}`` into a styled HTML span."""
    return _COLOR_PATTERN.sub(r'<span style="color:\1">\2</span>', text)


def _render_code_block(match: re.Match[str]) -> str:
    language = match.group(1) or ""
    return f"{CODE_FENCE}{language}{match.group(2)}{CODE_FENCE}"


def _render_quote_block(match: re.Match[str]) -> str:
    content = _LEADING_BREAK_PATTERN.sub("", match.group(1), count=1)
    content = _TRAILING_BREAK_PATTERN.sub("", content, count=1)
    lines = _LINE_BREAK_PATTERN.split(content)
    while len(lines) > 1 and not lines[-1]:
        lines.pop()
    return "\n".join(QUOTE_PREFIX + line for line in lines)
