"""Shared run-spec execution engine for CLI and SDK workflows.

This module resolves validated run-spec jobs against runtime config and
converts each one, so every entry point executes a batch the same way.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath

from core.config import JiraMdConfig
from core.constants import MARKDOWN_SUFFIX
from core.errors import JiraMdRunSpecError
from core.logging_config import get_logger
from core.run_spec import RunSpec, RunSpecJob, load_run_spec
from core.s3_uri import is_s3_uri, parse_s3_uri
from core.types import ConversionJob, ConversionOptions, ConversionResult
from conversion.output_writer import write_markdown
from conversion.pipeline import convert_source

_LOGGER = get_logger(__name__)


def execute_run_spec_file(spec_path: str, config: JiraMdConfig) -> list[str]:
    """Load and execute a run-spec file.

    Args:
        spec_path: Path to YAML run-spec.
        config: Runtime configuration.

    Returns:
        One output line per job: the written path, or the Markdown itself
        for jobs without an output destination.
    """
    spec = load_run_spec(spec_path)
    results = execute_run_spec(spec, config)
    return [render_result_line(result) for result in results]


def execute_run_spec(spec: RunSpec, config: JiraMdConfig) -> list[ConversionResult]:
    """Convert every job of a validated run-spec in order.

    Args:
        spec: Validated run-spec.
        config: Runtime configuration.

    Returns:
        Results aligned to job order.
    """
    options = ConversionOptions(strikethrough=_resolve_strikethrough(spec, config))
    results: list[ConversionResult] = []
    for job in build_conversion_jobs(spec, config):
        markdown = convert_source(job.source_uri, config, charset=job.charset, options=options)
        if job.output_path is not None:
            write_markdown(markdown, job.output_path)
        results.append(
            ConversionResult(
                source_uri=job.source_uri,
                output_path=job.output_path,
                markdown=markdown,
            )
        )
        _LOGGER.info(
            "run_spec_job_completed",
            source_uri=job.source_uri,
            output_path=str(job.output_path) if job.output_path else None,
        )
    return results


def build_conversion_jobs(spec: RunSpec, config: JiraMdConfig) -> list[ConversionJob]:
    """Resolve run-spec jobs into concrete conversion jobs.

    Args:
        spec: Validated run-spec.
        config: Runtime configuration supplying the fallback charset.

    Returns:
        Conversion jobs with absolute local paths and resolved charsets.

    Raises:
        JiraMdRunSpecError: If two jobs resolve to the same output file.
    """
    output_dir = _resolve_output_dir(spec)
    jobs: list[ConversionJob] = []
    claimed_outputs: dict[Path, str] = {}
    for job in spec.jobs:
        conversion_job = ConversionJob(
            source_uri=_resolve_source_uri(spec.base_dir, job.input),
            output_path=_resolve_output_path(spec.base_dir, output_dir, job),
            charset=job.charset or spec.defaults.charset or config.charset,
        )
        _claim_output_path(claimed_outputs, conversion_job)
        jobs.append(conversion_job)
    return jobs


def render_result_line(result: ConversionResult) -> str:
    """Render one result as a CLI output line."""
    if result.output_path is not None:
        return str(result.output_path)
    return result.markdown


def _claim_output_path(claimed_outputs: dict[Path, str], job: ConversionJob) -> None:
    if job.output_path is None:
        return
    output_key = job.output_path.resolve()
    previous_source = claimed_outputs.get(output_key)
    if previous_source is not None:
        raise JiraMdRunSpecError(
            f"Run spec jobs {previous_source} and {job.source_uri} both write to "
            f"{job.output_path}. Set a distinct output for one of them."
        )
    claimed_outputs[output_key] = job.source_uri


def _resolve_strikethrough(spec: RunSpec, config: JiraMdConfig) -> bool:
    if spec.defaults.strikethrough is None:
        return config.strikethrough
    return spec.defaults.strikethrough


def _resolve_output_dir(spec: RunSpec) -> Path | None:
    if spec.defaults.output_dir is None:
        return None
    return _resolve_local_path(spec.base_dir, spec.defaults.output_dir)


def _resolve_source_uri(base_dir: Path, raw_input: str) -> str:
    if is_s3_uri(raw_input):
        return raw_input
    return str(_resolve_local_path(base_dir, raw_input))


def _resolve_output_path(base_dir: Path, output_dir: Path | None, job: RunSpecJob) -> Path | None:
    if job.output is not None:
        return _resolve_local_path(output_dir or base_dir, job.output)
    if output_dir is None:
        return None
    return output_dir / f"{_source_stem(job.input)}{MARKDOWN_SUFFIX}"


def _resolve_local_path(base_dir: Path, raw_path: str) -> Path:
    path = Path(raw_path).expanduser()
    if path.is_absolute():
        return path
    return base_dir / path


def _source_stem(raw_input: str) -> str:
    if is_s3_uri(raw_input):
        return PurePosixPath(parse_s3_uri(raw_input).key).stem
    return Path(raw_input).stem
