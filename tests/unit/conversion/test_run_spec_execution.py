"""Unit tests for run-spec execution."""

from __future__ import annotations

from pathlib import Path

import pytest

from conversion.run_spec_execution import (
    build_conversion_jobs,
    execute_run_spec,
    execute_run_spec_file,
)
from core.config import JiraMdConfig
from core.errors import JiraMdRunSpecError
from core.run_spec import load_run_spec
from tests.fixture_paths import fixture_path, read_fixture_text


def _write_spec(tmp_path: Path, body: str) -> Path:
    spec_path = tmp_path / "batch.yaml"
    spec_path.write_text(body, encoding="utf-8")
    return spec_path


def test_build_conversion_jobs_names_outputs_after_input_stem(tmp_path: Path) -> None:
    """Jobs without an output should land in output_dir as <stem>.md."""
    spec_path = _write_spec(
        tmp_path,
        "version: 1\n"
        "defaults:\n"
        "  output_dir: md\n"
        "jobs:\n"
        "  - input: pages/intro.jira\n"
        "  - input: s3://wiki/space/guide.txt\n",
    )

    jobs = build_conversion_jobs(load_run_spec(str(spec_path)), JiraMdConfig.from_env())

    assert [job.output_path for job in jobs] == [
        tmp_path / "md" / "intro.md",
        tmp_path / "md" / "guide.md",
    ]


def test_build_conversion_jobs_prefers_job_charset(tmp_path: Path) -> None:
    """Job charset should override defaults, which override config."""
    spec_path = _write_spec(
        tmp_path,
        "version: 1\n"
        "defaults:\n"
        "  charset: latin-1\n"
        "jobs:\n"
        "  - input: a.jira\n"
        "    charset: GBK\n"
        "  - input: b.jira\n",
    )

    jobs = build_conversion_jobs(load_run_spec(str(spec_path)), JiraMdConfig.from_env())

    assert [job.charset for job in jobs] == ["GBK", "latin-1"]


def test_build_conversion_jobs_rejects_shared_output_path(tmp_path: Path) -> None:
    """Two jobs resolving to one output file should fail before converting."""
    spec_path = _write_spec(
        tmp_path,
        "version: 1\n"
        "defaults:\n"
        "  output_dir: out\n"
        "jobs:\n"
        "  - input: a/page.jira\n"
        "  - input: b/page.jira\n",
    )

    with pytest.raises(JiraMdRunSpecError, match="page.md"):
        build_conversion_jobs(load_run_spec(str(spec_path)), JiraMdConfig.from_env())

    assert not (tmp_path / "out").exists()


def test_execute_run_spec_writes_each_output(tmp_path: Path) -> None:
    """Each job with an output should be converted and written."""
    (tmp_path / "first.jira").write_text("h1. First", encoding="utf-8")
    (tmp_path / "second.jira").write_text("# step", encoding="utf-8")
    spec_path = _write_spec(
        tmp_path,
        "version: 1\n"
        "jobs:\n"
        "  - input: first.jira\n"
        "    output: out/first.md\n"
        "  - input: second.jira\n"
        "    output: out/second.md\n",
    )

    results = execute_run_spec(load_run_spec(str(spec_path)), JiraMdConfig.from_env())

    assert [result.markdown for result in results] == ["## First", "  1. step"] and (
        (tmp_path / "out" / "second.md").read_text(encoding="utf-8") == "  1. step"
    )


def test_execute_run_spec_applies_strikethrough_default(tmp_path: Path) -> None:
    """Run-spec strikethrough default should reach the delete rule."""
    (tmp_path / "page.jira").write_text("a -b- c", encoding="utf-8")
    spec_path = _write_spec(
        tmp_path,
        "version: 1\ndefaults:\n  strikethrough: true\njobs:\n  - page.jira\n",
    )

    results = execute_run_spec(load_run_spec(str(spec_path)), JiraMdConfig.from_env())

    assert results[0].markdown == "a ~~b~~ c"


def test_execute_run_spec_file_returns_markdown_without_outputs() -> None:
    """Jobs without an output destination should render their Markdown."""
    lines = execute_run_spec_file(
        str(fixture_path("run_spec/valid_batch.yaml")), JiraMdConfig.from_env()
    )

    assert lines == [read_fixture_text("markup/release_notes.md")]
