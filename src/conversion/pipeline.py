"""Conversion pipeline for Jira wiki markup.

This module owns the fixed rule order and folds every rule over the
input text. Each call is independent; nothing is shared between calls.
"""

from __future__ import annotations

from functools import partial

from core.config import JiraMdConfig
from core.errors import InvalidInputError
from core.logging_config import get_logger
from core.types import ConversionOptions, RewriteRule
from conversion.input_reader import read_markup
from transforms.block_rules import (
    convert_block_quote_lines,
    convert_code_blocks,
    convert_color_spans,
    convert_noformat_blocks,
    convert_quote_blocks,
)
from transforms.inline_spans import (
    convert_citation,
    convert_deleted,
    convert_inserted,
    convert_monospace,
    convert_strong,
    convert_subscript,
    convert_superscript,
)
from transforms.link_rules import convert_images, convert_links
from transforms.structure_rules import convert_headers, convert_lists
from transforms.table_rules import convert_table_headers

_LOGGER = get_logger(__name__)

RULE_ORDER = (
    "block_quote_line",
    "strong",
    "list",
    "header",
    "monospace",
    "citation",
    "insert",
    "superscript",
    "subscript",
    "delete",
    "code_block",
    "quote_block",
    "image",
    "link",
    "table_header",
    "noformat",
    "color",
)


def build_rule_sequence(options: ConversionOptions | None = None) -> tuple[RewriteRule, ...]:
    """Build the ordered rewrite rules.

    The list rule precedes the header rule so ``hN.`` output is not read
    as a list run. No-format and color run last so their brace markers
    are not disturbed by the span rules.

    Args:
        options: Behaviour switches; defaults when omitted.

    Returns:
        Rules in application order, named as in ``RULE_ORDER``.
    """
    resolved_options = options or ConversionOptions()
    rules = (
        RewriteRule("block_quote_line", convert_block_quote_lines),
        RewriteRule("strong", convert_strong),
        RewriteRule("list", convert_lists),
        RewriteRule("header", convert_headers),
        RewriteRule("monospace", convert_monospace),
        RewriteRule("citation", convert_citation),
        RewriteRule("insert", convert_inserted),
        RewriteRule("superscript", convert_superscript),
        RewriteRule("subscript", convert_subscript),
        RewriteRule(
            "delete",
            partial(convert_deleted, strikethrough=resolved_options.strikethrough),
        ),
        RewriteRule("code_block", convert_code_blocks),
        RewriteRule("quote_block", convert_quote_blocks),
        RewriteRule("image", convert_images),
        RewriteRule("link", convert_links),
        RewriteRule("table_header", convert_table_headers),
        RewriteRule("noformat", convert_noformat_blocks),
        RewriteRule("color", convert_color_spans),
    )
    return rules


def convert(text: str | None, options: ConversionOptions | None = None) -> str:
    """Convert Jira wiki markup into Markdown.

    Malformed or unbalanced markup is never an error: a rule that finds
    no match leaves the text unchanged and the pipeline always completes.

    Args:
        text: Markup text. An empty string is valid input.
        options: Behaviour switches; defaults when omitted.

    Returns:
        Converted Markdown text.

    Raises:
        InvalidInputError: If ``text`` is None or not a string.
    """
    if text is None:
        raise InvalidInputError(
            "Conversion input must not be None. Pass markup text; an empty string is allowed."
        )
    if not isinstance(text, str):
        raise InvalidInputError(
            f"Conversion input must be str, got {type(text).__name__}. "
            "Decode bytes with the source charset before converting."
        )
    document = text
    for rule in build_rule_sequence(options):
        rewritten = rule.apply(document)
        _LOGGER.debug("rule_applied", rule=rule.name, changed=rewritten != document)
        document = rewritten
    _LOGGER.info("markup_converted", input_chars=len(text), output_chars=len(document))
    return document


def convert_source(
    source_uri: str,
    config: JiraMdConfig,
    charset: str | None = None,
    options: ConversionOptions | None = None,
) -> str:
    """Read a markup source and convert it.

    Args:
        source_uri: Local file path or ``s3://bucket/key`` URI.
        config: Runtime configuration.
        charset: Optional charset override; ``config.charset`` when omitted.
        options: Optional behaviour switches; built from config when omitted.

    Returns:
        Converted Markdown text.

    Raises:
        JiraMdReadError: If the source cannot be read or decoded.
    """
    markup = read_markup(source_uri, charset or config.charset, config)
    resolved_options = options or ConversionOptions(strikethrough=config.strikethrough)
    return convert(markup, resolved_options)
