"""jiramd CLI entry points.

This module exposes the convert and run-spec commands.
It maps argparse commands onto conversion pipeline calls.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

from cli.run_spec_command import add_run_spec_command, run_run_spec_command
from core.config import JiraMdConfig, parse_charset, parse_log_level
from core.constants import PACKAGE_VERSION
from core.errors import JiraMdError
from core.logging_config import configure_logging
from core.types import ConversionOptions
from conversion.output_writer import write_markdown
from conversion.pipeline import convert_source


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="jiramd",
        description="Convert Jira wiki markup to Markdown",
    )
    parser.add_argument("-V", "--version", action="version", version=f"jiramd {PACKAGE_VERSION}")
    parser.add_argument("--log-level", help="Override JIRAMD_LOG_LEVEL for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_convert_command(subparsers)
    add_run_spec_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the jiramd CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args.log_level)
        configure_logging(config.log_level)
        if args.command == "convert":
            return _run_convert_command(config, args)
        if args.command == "run-spec":
            return run_run_spec_command(config, args)
    except JiraMdError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(log_level: str | None) -> JiraMdConfig:
    """Build runtime config with optional log-level override.

    Args:
        log_level: Optional override from the command line.

    Returns:
        Validated config.
    """
    config = JiraMdConfig.from_env()
    if log_level:
        config = replace(config, log_level=parse_log_level(log_level, "--log-level"))
    return config


def _run_convert_command(config: JiraMdConfig, args: argparse.Namespace) -> int:
    """Handle convert command.

    Args:
        config: Runtime config.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    charset = parse_charset(args.charset, "--charset") if args.charset else config.charset
    options = ConversionOptions(strikethrough=args.strikethrough or config.strikethrough)
    markdown = convert_source(args.input, config, charset=charset, options=options)
    written_path = write_markdown(markdown, args.output)
    if written_path is not None:
        print(written_path)
    return 0


def _add_convert_command(subparsers: Any) -> None:
    """Register convert subcommand."""
    parser = subparsers.add_parser("convert", help="Convert one markup file to Markdown")
    parser.add_argument(
        "-i",
        "--input",
        required=True,
        help="Input markup file or s3://bucket/key",
    )
    parser.add_argument(
        "-c",
        "--charset",
        help="Input charset (default: JIRAMD_CHARSET or UTF-8)",
    )
    parser.add_argument("-o", "--output", type=Path, help="Output Markdown file (default: stdout)")
    parser.add_argument(
        "--strikethrough",
        action="store_true",
        help="Render -deleted- spans as ~~deleted~~",
    )
