# SPDX-License-Identifier: MIT
"""Compare two versions."""

from __future__ import annotations

import json
from typing import Optional

import click

from software_version import Version

from ..config import OUTPUT_FORMATS
from ..main import Context, echo_info, pass_context

_OPERATORS = {-1: "<", 0: "==", 1: ">"}


def _describe(version: Version) -> str:
    return " ".join(str(token) for token in version.tokens)


@click.command()
@click.argument("left")
@click.argument("right")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format (defaults to the configured format).",
)
@click.option(
    "--exit-code",
    is_flag=True,
    help="Exit with 1 if LEFT < RIGHT and 2 if LEFT > RIGHT.",
)
@pass_context
def compare(
    ctx: Context,
    left: str,
    right: str,
    output_format: Optional[str],
    exit_code: bool,
) -> None:
    """Compare LEFT and RIGHT.

    Prints the relation between both versions. With --exit-code the result is
    also reported through the exit status, for use in shell scripts.

    \b
    Examples:
        software-version compare 1.0.0 1          # 1.0.0 == 1
        software-version compare 1:1.0 2.0        # 1:1.0 > 2.0
        software-version compare 6.0.^ 6.0.99999  # 6.0.^ > 6.0.99999
    """
    config = ctx.load_config()
    output_format = output_format or config.format

    left_version = Version(left)
    right_version = Version(right)
    result = left_version.compare(right_version)

    if output_format == "json":
        click.echo(json.dumps({"left": left, "right": right, "result": result}))
    else:
        if ctx.verbose:
            echo_info(f"{left}: {_describe(left_version)}")
            echo_info(f"{right}: {_describe(right_version)}")
        echo_info(f"{left} {_OPERATORS[result]} {right}")

    if exit_code and result != 0:
        raise SystemExit(1 if result < 0 else 2)
