# SPDX-License-Identifier: MIT
"""Tests for the semtag command."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest
from click.testing import CliRunner

from semantic_tag.cli.main import cli


def _lines(output: str) -> list[str]:
    return [line for line in output.splitlines() if line]


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    """Restore the semantic_tag logger level changed by -v."""
    logger = logging.getLogger("semantic_tag")
    level = logger.level
    yield logger
    logger.setLevel(level)


@pytest.fixture
def undecodable_file(tmp_path: Path) -> Path:
    """Create a tag file with a line that is not valid UTF-8."""
    path = tmp_path / "mixed.txt"
    path.write_bytes(b"v1.0.0\n\xff\xfe garbage\nv2.0.0-rc.1\nv0.5.0\n")
    return path


class TestSortCommand:
    """Tests for semtag sort."""

    def test_sort_file(self, cli_runner: CliRunner, tag_file: Path, tmp_path: Path) -> None:
        """Test sorting tags read from a file."""
        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "sort", str(tag_file)])

        assert result.exit_code == 0
        assert _lines(result.output) == [
            "v0.9.0",
            "v1.0.0-beta",
            "v1.0.0",
            "v1.0.0",
            "v1.0.0+build.7",
            "v1.1.0",
            "v2.0.0-rc.1",
        ]

    def test_sort_stdin(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test sorting tags read from stdin."""
        result = cli_runner.invoke(
            cli,
            ["-C", str(tmp_path), "sort"],
            input="v1.10.0\nv1.2.0\nnot a tag\nv1.2.0-rc.1\n",
        )

        assert result.exit_code == 0
        assert _lines(result.output) == ["v1.2.0-rc.1", "v1.2.0", "v1.10.0"]

    def test_sort_flags(self, cli_runner: CliRunner, tag_file: Path, tmp_path: Path) -> None:
        """Test --reverse, --no-pre-releases and --unique together."""
        result = cli_runner.invoke(
            cli,
            ["-C", str(tmp_path), "sort", "--reverse", "--no-pre-releases", "--unique", str(tag_file)],
        )

        assert result.exit_code == 0
        assert _lines(result.output) == ["v1.1.0", "v1.0.0", "v1.0.0+build.7", "v0.9.0"]

    def test_sort_uses_project_config(
        self, cli_runner: CliRunner, tag_file: Path, project_dir: Path
    ) -> None:
        """Test that [tool.semantic-tag] options apply."""
        result = cli_runner.invoke(cli, ["-C", str(project_dir), "sort", str(tag_file)])

        assert result.exit_code == 0
        assert _lines(result.output) == [
            "v1.1.0",
            "v1.0.0",
            "v1.0.0",
            "v1.0.0+build.7",
            "v0.9.0",
        ]

    def test_flags_override_project_config(
        self, cli_runner: CliRunner, tag_file: Path, project_dir: Path
    ) -> None:
        """Test that command-line flags win over configuration."""
        result = cli_runner.invoke(
            cli,
            ["-C", str(project_dir), "sort", "--no-reverse", "--pre-releases", str(tag_file)],
        )

        assert result.exit_code == 0
        assert _lines(result.output)[0] == "v0.9.0"
        assert _lines(result.output)[-1] == "v2.0.0-rc.1"

    def test_sort_invalid_config(self, cli_runner: CliRunner, tag_file: Path, tmp_path: Path) -> None:
        """Test that invalid configuration is reported as an error."""
        (tmp_path / "pyproject.toml").write_text("[tool.semantic-tag]\nreverse = 1\n")

        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "sort", str(tag_file)])

        assert result.exit_code == 1
        assert "must be true or false" in result.output

    def test_sort_no_tags(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test that input without tags prints a warning and nothing else."""
        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "sort"], input="hello\nworld\n")

        assert result.exit_code == 0
        assert "No semantic tags found" in result.output

    def test_verbose(
        self, cli_runner: CliRunner, tmp_path: Path, package_logger: logging.Logger
    ) -> None:
        """Test that verbose mode enables debug logging without changing the result."""
        result = cli_runner.invoke(
            cli, ["-v", "-C", str(tmp_path), "sort"], input="v1.0.0\nv0.1.0\n"
        )

        assert result.exit_code == 0
        assert "v0.1.0" in result.output
        assert package_logger.level == logging.DEBUG

    def test_quiet_by_default(
        self, cli_runner: CliRunner, tmp_path: Path, package_logger: logging.Logger
    ) -> None:
        """Test that debug logging stays off without -v."""
        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "sort"], input="v1.0.0\n")

        assert result.exit_code == 0
        assert package_logger.level == logging.WARNING

    def test_sort_skips_undecodable_lines(
        self, cli_runner: CliRunner, undecodable_file: Path, tmp_path: Path
    ) -> None:
        """Test that a line that is not valid UTF-8 is skipped like any other non-tag."""
        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "sort", str(undecodable_file)])

        assert result.exit_code == 0
        assert _lines(result.output) == ["v0.5.0", "v1.0.0", "v2.0.0-rc.1"]


class TestLatestCommand:
    """Tests for semtag latest."""

    def test_latest_skips_undecodable_lines(
        self, cli_runner: CliRunner, undecodable_file: Path, tmp_path: Path
    ) -> None:
        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "latest", str(undecodable_file)])

        assert result.exit_code == 0
        assert _lines(result.output) == ["v2.0.0-rc.1"]

    def test_latest(self, cli_runner: CliRunner, tag_file: Path, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "latest", str(tag_file)])

        assert result.exit_code == 0
        assert _lines(result.output) == ["v2.0.0-rc.1"]

    def test_latest_releases_only(
        self, cli_runner: CliRunner, tag_file: Path, tmp_path: Path
    ) -> None:
        result = cli_runner.invoke(
            cli, ["-C", str(tmp_path), "latest", "--no-pre-releases", str(tag_file)]
        )

        assert result.exit_code == 0
        assert _lines(result.output) == ["v1.1.0"]

    def test_latest_uses_project_config(
        self, cli_runner: CliRunner, tag_file: Path, project_dir: Path
    ) -> None:
        result = cli_runner.invoke(cli, ["-C", str(project_dir), "latest", str(tag_file)])

        assert result.exit_code == 0
        assert _lines(result.output) == ["v1.1.0"]

    def test_latest_no_tags(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "latest"], input="1.0.0\n")

        assert result.exit_code == 1
        assert "No semantic tags found" in result.output


class TestParseCommand:
    """Tests for semtag parse."""

    def test_parse(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "v2.0.0-pre+incompatible"])

        assert result.exit_code == 0
        assert _lines(result.output) == [
            "major: 2",
            "minor: 0",
            "patch: 0",
            "pre_release: pre",
            "build_metadata: incompatible",
        ]

    def test_parse_invalid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "v1.2.3_beta"])

        assert result.exit_code == 1
        assert "Invalid semantic tag: v1.2.3_beta" in result.output


class TestCompareCommand:
    """Tests for semtag compare."""

    def test_less(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "v1.0.0-rc.1", "v1.0.0"])

        assert result.exit_code == 0
        assert result.output.strip() == "<"

    def test_greater(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "v1.10.0", "v1.9.0"])

        assert result.exit_code == 0
        assert result.output.strip() == ">"

    def test_build_metadata_equal(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "v1.0.0+a", "v1.0.0+b"])

        assert result.exit_code == 0
        assert result.output.strip() == "="

    def test_invalid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "v1.0.0", "1.0.0"])

        assert result.exit_code == 1
        assert "Invalid semantic tag: 1.0.0" in result.output
