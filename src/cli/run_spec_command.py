"""Run-spec CLI command wiring.

This module registers the run-spec subcommand and delegates execution to the
shared run-spec engine used by CLI and SDK entry points.
"""

from __future__ import annotations

import argparse
from typing import Any

from core.config import JiraMdConfig
from conversion.run_spec_execution import execute_run_spec_file


def add_run_spec_command(subparsers: Any) -> None:
    """Register run-spec subcommand."""
    parser = subparsers.add_parser(
        "run-spec",
        help="Convert every job of a declarative YAML batch spec",
    )
    parser.add_argument("spec_file", help="Path to YAML run-spec file")


def run_run_spec_command(config: JiraMdConfig, args: argparse.Namespace) -> int:
    """Handle run-spec command invocation."""
    output_lines = execute_run_spec_file(args.spec_file, config)
    for line in output_lines:
        print(line)
    return 0
