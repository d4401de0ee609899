"""Core constants used across jiramd modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

PACKAGE_VERSION = "1.0.0"
DEFAULT_CHARSET = "UTF-8"
DEFAULT_LOG_LEVEL = "WARNING"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")
ENV_CHARSET = "JIRAMD_CHARSET"
ENV_STRIKETHROUGH = "JIRAMD_STRIKETHROUGH"
ENV_LOG_LEVEL = "JIRAMD_LOG_LEVEL"
ENV_S3_REGION = "JIRAMD_S3_REGION"
ENV_S3_PROFILE = "JIRAMD_S3_PROFILE"
MARKDOWN_SUFFIX = ".md"
CODE_FENCE = "```"
QUOTE_PREFIX = "> "
TABLE_HEADER_DELIMITER = "||"
TABLE_CELL_DELIMITER = "|"
TABLE_SEPARATOR_SEGMENT = "|---"
ORDERED_LIST_MARKER = "1."
UNORDERED_LIST_MARKER = "-"
FIRST_LEVEL_LIST_INDENT = 2
NESTED_LIST_INDENT_STEP = 4
RUN_SPEC_VERSION = 1
