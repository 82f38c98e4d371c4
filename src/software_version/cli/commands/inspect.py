# SPDX-License-Identifier: MIT
"""Show how a version is understood."""

from __future__ import annotations

import json
from typing import Optional

import click

from software_version import Version

from ..config import OUTPUT_FORMATS
from ..main import Context, echo_info, pass_context


@click.command()
@click.argument("version")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format (defaults to the configured format).",
)
@pass_context
def inspect(ctx: Context, version: str, output_format: Optional[str]) -> None:
    """Show the epoch, numeric parts and tokens of VERSION.

    \b
    Examples:
        software-version inspect 1:2.3.4-beta~rc2
        software-version inspect --format json KB.16.10.0012
    """
    config = ctx.load_config()
    output_format = output_format or config.format

    parsed = Version(version)

    if output_format == "json":
        data = {
            "version": parsed.to_json(),
            "epoch": parsed.epoch,
            "major": parsed.major,
            "minor": parsed.minor,
            "patch": parsed.patch,
            "tokens": [[token.kind.name, token.value] for token in parsed.tokens],
        }
        click.echo(json.dumps(data, indent=2))
        return

    echo_info(f"Version: {parsed}")
    echo_info(f"  Epoch: {parsed.epoch}")
    echo_info(f"  Major: {parsed.major}")
    echo_info(f"  Minor: {parsed.minor}")
    echo_info(f"  Patch: {parsed.patch}")
    echo_info("  Tokens:")
    for token in parsed.tokens:
        echo_info(f"    {token}")
