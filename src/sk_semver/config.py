# SPDX-License-Identifier: MIT
"""Configuration loading from the [tool.sk-semver] table of pyproject.toml."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .policy import POLICIES, GrammarPolicy

TOOL_TABLE = "sk-semver"

DEFAULT_POLICY = "strict"


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class SemverConfig:
    """Settings for the sk-semver command line tool.

    Attributes:
        policy: Name of the default grammar policy ("strict" or "loose")
        allow_prerelease: Whether validate accepts prerelease versions
        project_dir: Directory the configuration was loaded from, if any
    """

    policy: str = DEFAULT_POLICY
    allow_prerelease: bool = True
    project_dir: Optional[Path] = None

    @property
    def grammar(self) -> GrammarPolicy:
        """Return the configured policy object."""
        return POLICIES[self.policy]

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "SemverConfig":
        """Load configuration from pyproject.toml.

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

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Optional[Path] = None,
    ) -> "SemverConfig":
        """Create SemverConfig from a parsed pyproject.toml dictionary.

        Raises:
            ConfigError: If a setting has the wrong type or an unknown value
        """
        tools = pyproject.get("tool", {})
        if not isinstance(tools, dict):
            raise ConfigError("[tool] must be a table")

        tool = tools.get(TOOL_TABLE, {})
        if not isinstance(tool, dict):
            raise ConfigError(f"[tool.{TOOL_TABLE}] must be a table")

        policy = tool.get("policy", DEFAULT_POLICY)
        if not isinstance(policy, str) or policy.lower() not in POLICIES:
            known = ", ".join(sorted(POLICIES))
            raise ConfigError(f"Invalid policy {policy!r} (expected one of: {known})")

        allow_prerelease = tool.get("allow_prerelease", True)
        if not isinstance(allow_prerelease, bool):
            raise ConfigError("allow_prerelease must be a boolean")

        return cls(
            policy=policy.lower(),
            allow_prerelease=allow_prerelease,
            project_dir=project_dir,
        )


def find_project_root(start_dir: Optional[str | Path] = None) -> Optional[Path]:
    """Find the nearest directory containing pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root, or None if there is none
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    for candidate in (current, *current.parents):
        if (candidate / "pyproject.toml").exists():
            return candidate

    return None


def load_config(project_dir: Optional[str | Path] = None) -> SemverConfig:
    """Load configuration for a project.

    Args:
        project_dir: Project directory (defaults to finding project root)

    Returns:
        SemverConfig instance, with defaults when no pyproject.toml is found

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    if project_dir is None:
        project_dir = find_project_root()
        if project_dir is None:
            return SemverConfig()

    project_path = Path(project_dir)

    if (project_path / "pyproject.toml").exists():
        return SemverConfig.from_pyproject(project_path)

    return SemverConfig(project_dir=project_path)
