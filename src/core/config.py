"""Runtime configuration model for jiramd.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_CHARSET,
    DEFAULT_LOG_LEVEL,
    ENV_CHARSET,
    ENV_LOG_LEVEL,
    ENV_S3_PROFILE,
    ENV_S3_REGION,
    ENV_STRIKETHROUGH,
    FALSE_VALUES,
    SUPPORTED_LOG_LEVELS,
    TRUE_VALUES,
)
from core.errors import JiraMdConfigError


@dataclass(frozen=True)
class JiraMdConfig:
    """Validated runtime configuration.

    Attributes:
        charset: Default character set used to decode markup sources.
        strikethrough: Render ``-text-`` spans as ``~~text~~`` when enabled.
        log_level: Minimum structured log level written to stderr.
        s3_region: Optional default AWS region for S3 reads.
        s3_profile: Optional AWS profile for boto3 session initialization.
    """

    charset: str
    strikethrough: bool
    log_level: str
    s3_region: str | None
    s3_profile: str | None

    @classmethod
    def from_env(cls) -> "JiraMdConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            JiraMdConfigError: If environment values are invalid.
        """
        charset = parse_charset(os.getenv(ENV_CHARSET, DEFAULT_CHARSET), ENV_CHARSET)
        strikethrough = _parse_bool(os.getenv(ENV_STRIKETHROUGH, "false"), ENV_STRIKETHROUGH)
        log_level = parse_log_level(os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL), ENV_LOG_LEVEL)
        return cls(
            charset=charset,
            strikethrough=strikethrough,
            log_level=log_level,
            s3_region=os.getenv(ENV_S3_REGION),
            s3_profile=os.getenv(ENV_S3_PROFILE),
        )


def parse_charset(raw_value: str, source_name: str) -> str:
    """Validate a character set name.

    Args:
        raw_value: Charset name such as ``UTF-8`` or ``GBK``.
        source_name: Env var or option name used in error messages.

    Returns:
        The stripped charset name.

    Raises:
        JiraMdConfigError: If Python has no codec for the name.
    """
    charset = raw_value.strip()
    try:
        codecs.lookup(charset)
    except LookupError as error:
        raise JiraMdConfigError(
            f"Invalid {source_name} value: unknown charset '{raw_value}'. "
            "Use a codec name such as UTF-8, ISO-8859-1 or GBK."
        ) from error
    return charset


def parse_log_level(raw_value: str, source_name: str) -> str:
    """Validate and normalize a log level name.

    Args:
        raw_value: Level name, case-insensitive.
        source_name: Env var or option name used in error messages.

    Returns:
        Upper-case level name.

    Raises:
        JiraMdConfigError: If the level is not supported.
    """
    level = raw_value.strip().upper()
    if level in SUPPORTED_LOG_LEVELS:
        return level
    raise JiraMdConfigError(
        f"Invalid {source_name} value: '{raw_value}'. "
        f"Use one of: {', '.join(SUPPORTED_LOG_LEVELS)}."
    )


def _parse_bool(raw_value: str, source_name: str) -> bool:
    """Parse a boolean environment value.

    Args:
        raw_value: Raw string from environment.
        source_name: Env var name used in error messages.

    Returns:
        Parsed boolean.

    Raises:
        JiraMdConfigError: If value is not a recognized boolean token.
    """
    token = raw_value.strip().lower()
    if token in TRUE_VALUES:
        return True
    if token in FALSE_VALUES:
        return False
    raise JiraMdConfigError(
        f"Invalid {source_name} value: expected boolean, got '{raw_value}'. "
        f"Use one of: {', '.join(TRUE_VALUES + FALSE_VALUES)}."
    )
