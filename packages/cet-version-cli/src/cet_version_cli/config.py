# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = logging.getLogger(__name__)

# Table in pyproject.toml holding the settings
TOOL_TABLE = "cet-version"

RENDER_FORMS = ("ups", "dot", "cmake", "generic")

DEFAULT_FORM = "dot"


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """CLI configuration loaded from pyproject.toml.

    Attributes:
        project_dir: Directory containing pyproject.toml, if one was found
        default_form: Rendering used by `render` when no --form is given
        reverse: Sort newest first by default
        cache_size: Bound for the comparison cache used when sorting
            (None for unbounded)
    """

    project_dir: Optional[Path] = None
    default_form: str = DEFAULT_FORM
    reverse: bool = False
    cache_size: Optional[int] = None

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If the file is invalid or holds invalid settings
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        logger.debug("Loaded configuration from %s", pyproject_path)
        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Optional[Path] = None,
    ) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary.

        Args:
            pyproject: Parsed pyproject.toml as a dictionary
            project_dir: Directory containing pyproject.toml

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If a setting has an invalid value
        """
        tool = pyproject.get("tool", {}).get(TOOL_TABLE, {})
        if not isinstance(tool, dict):
            raise ConfigError(f"[tool.{TOOL_TABLE}] must be a table")

        default_form = tool.get("default_form", DEFAULT_FORM)
        if default_form not in RENDER_FORMS:
            raise ConfigError(
                f"default_form must be one of {', '.join(RENDER_FORMS)}, got {default_form!r}"
            )

        reverse = tool.get("reverse", False)
        if not isinstance(reverse, bool):
            raise ConfigError(f"reverse must be a boolean, got {reverse!r}")

        # bool is an int subclass; reject it explicitly
        cache_size = tool.get("cache_size")
        if cache_size is not None and (
            isinstance(cache_size, bool) or not isinstance(cache_size, int) or cache_size < 1
        ):
            raise ConfigError(f"cache_size must be a positive integer, got {cache_size!r}")

        return cls(
            project_dir=project_dir,
            default_form=default_form,
            reverse=reverse,
            cache_size=cache_size,
        )


def find_project_root(start_dir: Optional[str | Path] = None) -> Path:
    """Find the project root by looking for pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root directory

    Raises:
        ConfigError: If no project root is found
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent

    raise ConfigError("Could not find project root (no pyproject.toml found)")


def load_config(project_dir: Optional[str | Path] = None) -> CLIConfig:
    """Load CLI configuration from the project directory.

    Args:
        project_dir: Project directory (defaults to finding project root)

    Returns:
        CLIConfig instance; defaults when no pyproject.toml is found

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    if project_dir is None:
        try:
            project_dir = find_project_root()
        except ConfigError:
            logger.debug("No pyproject.toml found, using default configuration")
            return CLIConfig()

    project_path = Path(project_dir)

    if (project_path / "pyproject.toml").exists():
        return CLIConfig.from_pyproject(project_path)

    return CLIConfig(project_dir=project_path)
