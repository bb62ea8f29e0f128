# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for sk-semver tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_project(tmp_path: Path) -> Path:
    """Create a project directory whose pyproject.toml selects the loose policy."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()

    (project_dir / "pyproject.toml").write_text(
        """[project]
name = "test-project"
version = "1.0.0"

[tool.sk-semver]
policy = "loose"
allow_prerelease = false
"""
    )

    return project_dir
