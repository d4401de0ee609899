"""Public SDK surface for jiramd.

This module provides a stable import path for library users.
It re-exports the conversion entry points and typed option models.
"""

from __future__ import annotations

from core.config import JiraMdConfig
from core.constants import PACKAGE_VERSION
from core.errors import (
    InvalidInputError,
    JiraMdConfigError,
    JiraMdError,
    JiraMdReadError,
    JiraMdRunSpecError,
    JiraMdWriteError,
)
from core.run_spec import load_run_spec
from core.types import ConversionOptions, ConversionResult
from conversion.pipeline import RULE_ORDER, build_rule_sequence, convert, convert_source
from conversion.run_spec_execution import execute_run_spec, execute_run_spec_file

__version__ = PACKAGE_VERSION

__all__ = [
    "ConversionOptions",
    "ConversionResult",
    "InvalidInputError",
    "JiraMdConfig",
    "JiraMdConfigError",
    "JiraMdError",
    "JiraMdReadError",
    "JiraMdRunSpecError",
    "JiraMdWriteError",
    "RULE_ORDER",
    "build_rule_sequence",
    "convert",
    "convert_source",
    "execute_run_spec",
    "execute_run_spec_file",
    "load_run_spec",
]
