# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def config_dir(tmp_path: Path):
    """Return a factory writing a pyproject.toml with the given tool table."""

    def write(body: str) -> Path:
        (tmp_path / "pyproject.toml").write_text(
            '[project]\nname = "example"\nversion = "1.0.0"\n\n' + body
        )
        return tmp_path

    return write
