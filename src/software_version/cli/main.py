# SPDX-License-Identifier: MIT
"""CLI entry point for the software-version command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .. import __version__
from .config import CLIConfig, ConfigError, load_config


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result.

        Exits with status 1 if the configuration is invalid.
        """
        if self.config is None:
            try:
                self.config = load_config(self.project_dir)
            except ConfigError as e:
                echo_error(str(e))
                raise SystemExit(1) from e
        return self.config


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


@click.group()
@click.version_option(version=__version__, prog_name="software-version")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Read configuration from this directory instead of the current one.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Compare and sort software version strings.

    Versions do not need to follow any particular format: epochs (1:2.0),
    pre-releases (1.0rc1, 2.0~beta) and build suffixes (1.0-2) are all
    ordered the way package managers expect.

    \b
    Examples:
        software-version compare 1.0.0 1.0
        software-version compare --exit-code 1.0rc1 1.0
        software-version sort 1.10 1.9 1.0alpha
        dpkg-query -W -f '${Version}\\n' | software-version sort -u
        software-version inspect 1:2.3.4-beta~rc2
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Import and register commands
from .commands import compare, inspect, sort

cli.add_command(compare.compare)
cli.add_command(sort.sort)
cli.add_command(inspect.inspect)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
