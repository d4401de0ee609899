"""Unit tests for image and link rewrite rules."""

from __future__ import annotations

from transforms.link_rules import convert_images, convert_links


def test_convert_images_renders_markdown_image() -> None:
    """Bang-delimited URLs should become Markdown images."""
    assert convert_images("see !diagram.png!") == "see ![](diagram.png)"


def test_convert_images_keeps_attribute_suffix() -> None:
    """Thumbnail and attribute suffixes are passed through with the source."""
    assert convert_images("!shot.png|thumbnail!") == "![](shot.png|thumbnail)"


def test_convert_images_ignores_exclamation_sentences() -> None:
    """Punctuation followed by whitespace is not an image."""
    assert convert_images("Wow! Nice!") == "Wow! Nice!"


def test_convert_links_renders_piped_link() -> None:
    """Labelled links should become Markdown links."""
    assert convert_links("[Text|http://x]") == "[Text](http://x)"


def test_convert_links_renders_bare_link_as_autolink() -> None:
    """A bracketed URL should become an autolink."""
    assert convert_links("[http://x]") == "<http://x>"


def test_convert_links_keeps_trailing_text() -> None:
    """Text after a bare link should be kept."""
    assert convert_links("[a] and [b] done") == "<a> and <b> done"


def test_convert_links_leaves_markdown_links_untouched() -> None:
    """Brackets directly followed by a parenthesis are already Markdown."""
    assert convert_links("[docs](http://x) ![](img.png)") == "[docs](http://x) ![](img.png)"
