# SPDX-License-Identifier: MIT
"""Sort versions."""

from __future__ import annotations

import json
import sys
from typing import Optional

import click

from software_version import Version, sort_versions

from ..config import OUTPUT_FORMATS
from ..main import Context, echo_info, echo_warning, pass_context


def _read_stdin() -> list[str]:
    return [line.strip() for line in sys.stdin if line.strip()]


def _drop_duplicates(versions: list[Version]) -> list[Version]:
    """Keep the first of each run of equal versions (input must be sorted)."""
    unique: list[Version] = []
    for version in versions:
        if not unique or unique[-1] != version:
            unique.append(version)
    return unique


@click.command()
@click.argument("versions", nargs=-1)
@click.option(
    "--reverse/--no-reverse",
    default=None,
    help="Sort in descending order.",
)
@click.option(
    "--unique/--no-unique",
    "-u",
    default=None,
    help="Only print the first of versions comparing equal (1.0 and 1.0.0).",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format (defaults to the configured format).",
)
@pass_context
def sort(
    ctx: Context,
    versions: tuple[str, ...],
    reverse: Optional[bool],
    unique: Optional[bool],
    output_format: Optional[str],
) -> None:
    """Sort VERSIONS in ascending order.

    Versions are read from standard input, one per line, when none are given
    on the command line.

    \b
    Examples:
        software-version sort 1.10 1.9 1.0alpha
        software-version sort --reverse 2:0.1 3.0 1.0
        cat versions.txt | software-version sort --unique
    """
    config = ctx.load_config()
    if reverse is None:
        reverse = config.reverse
    if unique is None:
        unique = config.unique
    output_format = output_format or config.format

    values = list(versions) or _read_stdin()
    if not values:
        echo_warning("No versions to sort")

    ordered = sort_versions(values, reverse=reverse)
    if unique:
        ordered = _drop_duplicates(ordered)
        if ctx.verbose and output_format != "json":
            echo_info(f"Dropped {len(values) - len(ordered)} duplicate version(s)")

    if output_format == "json":
        click.echo(json.dumps([version.to_json() for version in ordered]))
    else:
        for version in ordered:
            echo_info(str(version))
