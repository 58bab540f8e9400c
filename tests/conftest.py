# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for semantic tag tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def tag_file(tmp_path: Path) -> Path:
    """Create a file of tags mixed with lines that are not tags."""
    path = tmp_path / "tags.txt"
    path.write_text(
        "\n".join(
            [
                "v1.0.0",
                "v2.0.0-rc.1",
                "release-2023",
                "v0.9.0",
                "  v1.1.0  ",
                "v1.0.0",
                "1.5.0",
                "v1.0.0+build.7",
                "v1.0.0-beta",
                "",
            ]
        )
    )
    return path


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Create a project directory whose pyproject.toml configures sorting."""
    project = tmp_path / "project"
    project.mkdir()
    (project / "pyproject.toml").write_text(
        """[project]
name = "example"
version = "1.0.0"

[tool.semantic-tag]
reverse = true
include_pre_releases = false
"""
    )
    return project
