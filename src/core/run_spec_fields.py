"""Type-safe field parsing helpers for run-spec files.

This module centralizes primitive parsing so run-spec loading stays
concise and produces consistent validation errors across CLI and SDK flows.
"""

from __future__ import annotations

from typing import Mapping

from core.config import parse_charset
from core.errors import JiraMdConfigError, JiraMdRunSpecError


def required_string(args: Mapping[str, object], field_name: str) -> str:
    """Read a required string field from a run-spec mapping."""
    value = optional_string(args, field_name)
    if value is None:
        raise JiraMdRunSpecError(f"Run-spec job is missing required field '{field_name}'.")
    return value


def optional_string(args: Mapping[str, object], field_name: str) -> str | None:
    """Read an optional string field from a run-spec mapping."""
    value = args.get(field_name)
    if value is None:
        return None
    if isinstance(value, str):
        stripped = value.strip()
        return stripped if stripped else None
    raise JiraMdRunSpecError(f"Run-spec field '{field_name}' must be a string when provided.")


def optional_bool(args: Mapping[str, object], field_name: str) -> bool | None:
    """Read an optional boolean field from a run-spec mapping."""
    value = args.get(field_name)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    raise JiraMdRunSpecError(f"Run-spec field '{field_name}' must be true/false.")


def optional_charset(args: Mapping[str, object], field_name: str) -> str | None:
    """Read an optional charset name and check that a codec exists for it."""
    value = optional_string(args, field_name)
    if value is None:
        return None
    try:
        return parse_charset(value, f"run-spec field '{field_name}'")
    except JiraMdConfigError as error:
        raise JiraMdRunSpecError(str(error)) from error
