# SPDX-License-Identifier: MIT
"""Command-line interface for comparing and sorting versions."""

from .main import cli, main

__all__ = ["cli", "main"]
