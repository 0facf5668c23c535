# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory with a [tool.cet-version] table."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()

    pyproject = project_dir / "pyproject.toml"
    pyproject.write_text(
        """[project]
name = "test-product"
version = "1.0.0"

[tool.cet-version]
default_form = "ups"
reverse = true
cache_size = 64
"""
    )

    yield project_dir


@pytest.fixture
def empty_project(tmp_path: Path) -> Path:
    """Create a project directory whose pyproject.toml has no tool table."""
    project_dir = tmp_path / "empty_project"
    project_dir.mkdir()
    (project_dir / "pyproject.toml").write_text('[project]\nname = "empty"\n')
    return project_dir
