"""jiramd exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class JiraMdError(Exception):
    """Base exception for all jiramd failures."""


class InvalidInputError(JiraMdError):
    """Raised when conversion input is absent or not text."""


class JiraMdConfigError(JiraMdError):
    """Raised for invalid runtime configuration."""


class JiraMdReadError(JiraMdError):
    """Raised when markup source cannot be read or decoded."""


class JiraMdWriteError(JiraMdError):
    """Raised when Markdown output cannot be written."""


class JiraMdDependencyError(JiraMdError):
    """Raised when an optional runtime dependency is missing."""


class JiraMdRunSpecError(JiraMdError):
    """Raised for invalid or unsupported run-spec configuration."""
