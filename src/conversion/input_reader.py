"""Markup source readers.

This module loads Jira markup from local files or S3 objects and decodes
it under a caller-specified character set.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from core.config import JiraMdConfig
from core.errors import JiraMdDependencyError, JiraMdReadError
from core.logging_config import get_logger
from core.s3_uri import S3Location, is_s3_uri, parse_s3_uri

_LOGGER = get_logger(__name__)


def read_markup(source_uri: str, charset: str, config: JiraMdConfig) -> str:
    """Load markup text from a local file or S3.

    Args:
        source_uri: Local file path or ``s3://bucket/key`` URI.
        charset: Character set used to decode the raw bytes.
        config: Runtime configuration for S3 session defaults.

    Returns:
        Decoded markup text.

    Raises:
        JiraMdReadError: If source cannot be read or decoded.
    """
    if is_s3_uri(source_uri):
        payload = _read_s3_bytes(parse_s3_uri(source_uri), config)
    else:
        payload = _read_local_bytes(Path(source_uri).expanduser())
    text = decode_markup(payload, charset, source_uri)
    _LOGGER.info("markup_read", source_uri=source_uri, charset=charset, chars=len(text))
    return text


def decode_markup(payload: bytes, charset: str, source_uri: str) -> str:
    """Decode raw source bytes.

    Args:
        payload: Raw bytes.
        charset: Codec name.
        source_uri: Source label used in error messages.

    Returns:
        Decoded text.

    Raises:
        JiraMdReadError: If the charset is unknown or bytes are invalid for it.
    """
    try:
        return payload.decode(charset)
    except LookupError as error:
        raise JiraMdReadError(
            f"Failed to decode {source_uri}: unknown charset '{charset}'. "
            "Pass a codec name such as UTF-8 or GBK."
        ) from error
    except UnicodeDecodeError as error:
        raise JiraMdReadError(
            f"Failed to decode {source_uri} as {charset}: {error.reason} at byte "
            f"{error.start}. Pass the charset the file was saved with."
        ) from error


def _read_local_bytes(source_path: Path) -> bytes:
    """Read raw bytes from the local file system.

    Args:
        source_path: Input file.

    Returns:
        File contents.

    Raises:
        JiraMdReadError: If path is missing, a directory, or unreadable.
    """
    if not source_path.exists():
        raise JiraMdReadError(
            f"Failed to read source at {source_path}: path does not exist. "
            "Provide an existing markup file."
        )
    if not source_path.is_file():
        raise JiraMdReadError(
            f"Failed to read source at {source_path}: not a regular file. "
            "Provide a single markup file."
        )
    try:
        return source_path.read_bytes()
    except OSError as error:
        raise JiraMdReadError(
            f"Failed to read source at {source_path}: {error}. Check file permissions."
        ) from error


def _read_s3_bytes(location: S3Location, config: JiraMdConfig) -> bytes:
    """Download one S3 object body.

    Args:
        location: Target bucket/key.
        config: Runtime config for region/profile.

    Returns:
        Object body bytes.

    Raises:
        JiraMdReadError: If the object cannot be downloaded.
    """
    s3_client = _create_s3_client(config)
    try:
        response = s3_client.get_object(Bucket=location.bucket, Key=location.key)
        return response["Body"].read()
    except Exception as error:
        raise JiraMdReadError(
            f"Failed to read s3://{location.bucket}/{location.key}: {error}. "
            "Check the object key and AWS credentials."
        ) from error


def _create_s3_client(config: JiraMdConfig) -> Any:
    """Create a boto3 S3 client.

    Args:
        config: Runtime config containing optional profile/region.

    Returns:
        Boto3 S3 client.

    Raises:
        JiraMdDependencyError: If boto3 is missing.
    """
    try:
        import boto3
    except ImportError as error:
        raise JiraMdDependencyError(
            "S3 support requires boto3, but it is not installed. "
            "Install jiramd[s3] to read s3:// sources."
        ) from error
    session = boto3.session.Session(**_build_boto3_session_kwargs(config))
    return session.client("s3")


def _build_boto3_session_kwargs(config: JiraMdConfig) -> dict[str, str]:
    """Build boto3 Session kwargs from config."""
    kwargs: dict[str, str] = {}
    if config.s3_profile:
        kwargs["profile_name"] = config.s3_profile
    if config.s3_region:
        kwargs["region_name"] = config.s3_region
    return kwargs
