# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

OUTPUT_FORMATS = ("text", "json")


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """CLI defaults loaded from the ``[tool.software-version]`` table.

    Attributes:
        project_dir: Directory the configuration was looked up in
        format: Default output format, "text" or "json"
        reverse: Sort in descending order by default
        unique: Drop duplicate versions when sorting by default
    """

    project_dir: Path
    format: str = "text"
    reverse: bool = False
    unique: bool = False

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load configuration from pyproject.toml.

        A missing file yields the default configuration.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If the file is invalid or holds invalid values
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            return cls(project_dir=project_path)

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax in {pyproject_path}: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Path,
    ) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary.

        Args:
            pyproject: Parsed pyproject.toml as a dictionary
            project_dir: Directory containing pyproject.toml

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If a known option has an invalid value
        """
        table = pyproject.get("tool", {}).get("software-version", {})
        if not isinstance(table, dict):
            raise ConfigError("[tool.software-version] must be a table")

        output_format = table.get("format", "text")
        if output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"Invalid format {output_format!r}, expected one of: {', '.join(OUTPUT_FORMATS)}"
            )

        for option in ("reverse", "unique"):
            if not isinstance(table.get(option, False), bool):
                raise ConfigError(f"Option {option!r} must be a boolean")

        return cls(
            project_dir=project_dir,
            format=output_format,
            reverse=table.get("reverse", False),
            unique=table.get("unique", False),
        )


def load_config(project_dir: Optional[str | Path] = None) -> CLIConfig:
    """Load CLI configuration from the project directory.

    Args:
        project_dir: Directory holding pyproject.toml (defaults to cwd)

    Returns:
        CLIConfig instance

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    project_path = Path(project_dir) if project_dir is not None else Path.cwd()
    return CLIConfig.from_pyproject(project_path)
