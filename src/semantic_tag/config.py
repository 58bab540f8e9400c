# SPDX-License-Identifier: MIT
"""Sort configuration loaded from pyproject.toml.

Options live in the ``[tool.semantic-tag]`` table:

    [tool.semantic-tag]
    reverse = true
    include_pre_releases = false
    unique = true
"""

from __future__ import annotations

import dataclasses
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Optional

from .compare import sort_tags
from .tag import Tag

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

TOOL_SECTION = "semantic-tag"


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass(frozen=True)
class SortConfig:
    """How tag lists are filtered and ordered.

    Attributes:
        reverse: Newest tag first instead of oldest first
        include_pre_releases: Keep tags with pre-release identifiers
        unique: Drop tags identical (build metadata included) to an earlier one
    """

    reverse: bool = False
    include_pre_releases: bool = True
    unique: bool = False

    def with_overrides(self, **overrides: Optional[bool]) -> "SortConfig":
        """Return a copy with every override that is not None applied."""
        changes = {name: value for name, value in overrides.items() if value is not None}
        return dataclasses.replace(self, **changes)

    def apply(self, tags: Iterable[Tag]) -> list[Tag]:
        """Filter and order tags as configured."""
        selected = list(tags)
        if not self.include_pre_releases:
            selected = [tag for tag in selected if tag.is_base()]

        if self.unique:
            seen: set[Tag] = set()
            distinct: list[Tag] = []
            for tag in selected:
                if tag not in seen:
                    seen.add(tag)
                    distinct.append(tag)
            selected = distinct

        return sort_tags(selected, reverse=self.reverse)

    @classmethod
    def from_pyproject(cls, pyproject_path: str | Path) -> "SortConfig":
        """Load configuration from a pyproject.toml file.

        Args:
            pyproject_path: Path to pyproject.toml

        Returns:
            SortConfig instance

        Raises:
            ConfigError: If the file is invalid TOML or holds invalid options
            FileNotFoundError: If the file does not exist
        """
        path = Path(pyproject_path)
        if not path.exists():
            raise FileNotFoundError(f"pyproject.toml not found: {path}")

        try:
            with open(path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax in {path}: {e}") from e

        return cls.from_pyproject_dict(pyproject)

    @classmethod
    def from_pyproject_dict(cls, pyproject: dict[str, Any]) -> "SortConfig":
        """Create SortConfig from a parsed pyproject.toml dictionary.

        Raises:
            ConfigError: If [tool] or the tool section is not a table, or holds
                unknown or non-boolean options
        """
        tool = pyproject.get("tool", {})
        if not isinstance(tool, dict):
            raise ConfigError("[tool] must be a table")

        section = tool.get(TOOL_SECTION, {})
        if not isinstance(section, dict):
            raise ConfigError(f"[tool.{TOOL_SECTION}] must be a table")

        known = {f.name for f in dataclasses.fields(cls)}
        options: dict[str, bool] = {}
        for key, value in section.items():
            name = key.replace("-", "_")
            if name not in known:
                raise ConfigError(f"Unknown option in [tool.{TOOL_SECTION}]: {key!r}")
            if not isinstance(value, bool):
                raise ConfigError(
                    f"Option {key!r} in [tool.{TOOL_SECTION}] must be true or false, "
                    f"got {value!r}"
                )
            options[name] = value

        return cls(**options)


def find_project_root(start: Optional[Path] = None) -> Optional[Path]:
    """Find the nearest directory containing pyproject.toml.

    Args:
        start: Directory to start searching from (default: current directory)

    Returns:
        The directory containing pyproject.toml, or None if not found
    """
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        if (directory / "pyproject.toml").is_file():
            return directory
    return None


def load_config(project_dir: Optional[Path] = None) -> SortConfig:
    """Load the sort configuration for a project.

    Falls back to defaults when no pyproject.toml is found.
    """
    root = find_project_root(project_dir)
    if root is None:
        return SortConfig()
    return SortConfig.from_pyproject(root / "pyproject.toml")
