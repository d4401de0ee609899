"""Inline span rewrite rules.

This module converts delimiter-pair spans (strong, monospace, citation,
insert, superscript, subscript, delete) into their Markdown or inline
HTML equivalents. Every rule is a pure ``str -> str`` function that
rewrites all non-overlapping matches left to right in one pass.
"""

from __future__ import annotations

import re

# Content may not start with whitespace or the delimiter, so list runs like
# ``* item`` and ``** item`` are left for the list rule.
_STRONG_PATTERN = re.compile(r"([*_])(?!\s|\1)([^\n]+?)\1")
_MONOSPACE_PATTERN = re.compile(r"\{\{([^}]+)\}\}")
_CITATION_PATTERN = re.compile(r"\?\?([^?]+)\?\?")
_INSERT_PATTERN = re.compile(r"\+([^+\n]+)\+")
_SUPERSCRIPT_PATTERN = re.compile(r"\^([^^\n]+)\^")
_SUBSCRIPT_PATTERN = re.compile(r"~([^~\n]+)~")
_DELETE_PATTERN = re.compile(r"-([^-\n]+)-")
_STRIKETHROUGH_PATTERN = re.compile(r"(?<!\S)-(?=\S)([^-\n]+?)(?<=\S)-(?!\S)")


def convert_strong(text: str) -> str:
    """Rewrite ``*text*`` and ``_text_`` spans to ``**text**``.

    Args:
        text: Document text.

    Returns:
        Text with every strong or emphasis span rendered bold.
    """
    return _STRONG_PATTERN.sub(r"**\2**", text)


def convert_monospace(text: str) -> str:
    """Rewrite ``{{text}}`` to an inline code span."""
    return _MONOSPACE_PATTERN.sub(r"`\1`", text)


def convert_citation(text: str) -> str:
    """Rewrite ``??text??`` to ``<cite>text</cite>``."""
    return _CITATION_PATTERN.sub(r"<cite>\1</cite>", text)


def convert_inserted(text: str) -> str:
    """Rewrite ``+text+`` to ``<ins>text</ins>``."""
    return _INSERT_PATTERN.sub(r"<ins>\1</ins>", text)


def convert_superscript(text: str) -> str:
    """Rewrite ``^text^`` to ``<sup>text</sup>``."""
    return _SUPERSCRIPT_PATTERN.sub(r"<sup>\1</sup>", text)


def convert_subscript(text: str) -> str:
    """Rewrite ``~text~`` to ``<sub>text</sub>``."""
    return _SUBSCRIPT_PATTERN.sub(r"<sub>\1</sub>", text)


def convert_deleted(text: str, strikethrough: bool = False) -> str:
    """Rewrite ``-text-`` deleted spans.

    Deleted spans pass through unchanged unless ``strikethrough`` is set,
    in which case whitespace-delimited spans become ``~~text~~``. The
    whitespace requirement keeps hyphenated words and list bullets intact.

    Args:
        text: Document text.
        strikethrough: Emit Markdown strikethrough instead of the source span.

    Returns:
        Rewritten text.
    """
    if strikethrough:
        return _STRIKETHROUGH_PATTERN.sub(r"~~\1~~", text)
    return _DELETE_PATTERN.sub(r"-\1-", text)
