"""Image and link rewrite rules.

This module converts ``!url!`` images and ``[label|url]`` / ``[url]``
links into Markdown image, link, and autolink syntax.
"""

from __future__ import annotations

import re

# The source is kept verbatim, including attribute suffixes such as ``|thumbnail``.
_IMAGE_PATTERN = re.compile(r"!([^\s!]+)!")
_PIPED_LINK_PATTERN = re.compile(r"\[([^|\[\]\n]+)\|([^\]\n]+)\]")
_BARE_LINK_PATTERN = re.compile(r"\[([^\[\]\n]+)\](?!\()")


def convert_images(text: str) -> str:
    """Rewrite ``!url!`` into ``![](url)``."""
    return _IMAGE_PATTERN.sub(r"![](\1)", text)


def convert_links(text: str) -> str:
    """Rewrite piped links, then remaining bracketed labels.

    ``[text|url]`` becomes ``[text](url)``. Any ``[label]`` left over that
    is not immediately followed by ``(`` becomes ``<label>``; text after
    the closing bracket is kept as is.

    Args:
        text: Document text.

    Returns:
        Text with links rewritten.
    """
    text = _PIPED_LINK_PATTERN.sub(r"[\1](\2)", text)
    return _BARE_LINK_PATTERN.sub(r"<\1>", text)
