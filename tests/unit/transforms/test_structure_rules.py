"""Unit tests for list and header rewrite rules."""

from __future__ import annotations

import pytest

from transforms.structure_rules import convert_headers, convert_lists, list_indent_width


@pytest.mark.parametrize(
    ("markup", "expected"),
    [
        ("# item", "  1. item"),
        ("## item", "      1. item"),
        ("### item", "          1. item"),
        ("- item", "  - item"),
        ("+ item", "  - item"),
        ("* item", "  - item"),
        ("*# item", "      1. item"),
        ("#* item", "      - item"),
    ],
)
def test_convert_lists_renders_marker_and_indent(markup: str, expected: str) -> None:
    """The last run character picks the marker and run length the indent."""
    assert convert_lists(markup) == expected


def test_convert_lists_rewrites_every_line() -> None:
    """Each list line in a document should be rewritten."""
    text = "# one\n## two\nplain"

    assert convert_lists(text) == "  1. one\n      1. two\nplain"


def test_convert_lists_requires_space_after_run() -> None:
    """A marker run glued to its content is not a list item."""
    assert convert_lists("#hashtag") == "#hashtag"


def test_list_indent_width_grows_by_four_per_level() -> None:
    """Indent width should be 2, then (n - 1) * 4 + 2."""
    assert [list_indent_width(length) for length in (1, 2, 3)] == [2, 6, 10]


@pytest.mark.parametrize(
    ("markup", "expected"),
    [
        ("h0. Zero", "# Zero"),
        ("h1. Title", "## Title"),
        ("h6. X", "####### X"),
    ],
)
def test_convert_headers_adds_one_level(markup: str, expected: str) -> None:
    """Header level N should map to N + 1 hashes."""
    assert convert_headers(markup) == expected


def test_convert_headers_ignores_unsupported_level_and_indented_lines() -> None:
    """Only h0 to h6 at the start of a line are headers."""
    text = "h7. Seven\n  h1. Indented"

    assert convert_headers(text) == text
