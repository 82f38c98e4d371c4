# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import compare, inspect, sort

__all__ = ["compare", "inspect", "sort"]
