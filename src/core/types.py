"""Shared typed models.

This module defines immutable data models used by the conversion
pipeline, input readers, run-spec execution, and the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from core.constants import DEFAULT_CHARSET

RuleFunction = Callable[[str], str]


@dataclass(frozen=True)
class ConversionOptions:
    """Behaviour switches for the conversion pipeline.

    Attributes:
        strikethrough: Render ``-text-`` spans as ``~~text~~`` instead of
            passing them through unchanged.
    """

    strikethrough: bool = False


@dataclass(frozen=True)
class RewriteRule:
    """One named stage of the conversion pipeline.

    Attributes:
        name: Stable rule identifier used in logs and ordering checks.
        apply: Pure text-to-text rewrite function.
    """

    name: str
    apply: RuleFunction


@dataclass(frozen=True)
class ConversionJob:
    """One markup source to convert.

    Attributes:
        source_uri: Local file path or ``s3://bucket/key`` URI.
        output_path: Optional Markdown destination; stdout when absent.
        charset: Character set used to decode the source.
    """

    source_uri: str
    output_path: Path | None = None
    charset: str = DEFAULT_CHARSET


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of one converted job.

    Attributes:
        source_uri: Source the markup was read from.
        output_path: Written Markdown file, or None when printed.
        markdown: Converted Markdown text.
    """

    source_uri: str
    output_path: Path | None
    markdown: str
