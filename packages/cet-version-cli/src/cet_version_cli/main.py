# SPDX-License-Identifier: MIT
"""CLI entry point for cet-version command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .config import CLIConfig, ConfigError, load_config


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.project_dir: Optional[Path] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


@click.group()
@click.version_option(package_name="cet-version")
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
    help="Read configuration from this directory's pyproject.toml.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Version string parsing, rendering and ordering.

    \b
    Examples:
        cet-version parse 1.5.rc7
        cet-version render v1_5_rc7 --form generic
        cet-version compare 1 1.2
        cet-version sort 1.2 1 develop 1.2rc1
    """
    ctx.project_dir = directory
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Import and register commands
from .commands import compare, parse, render, sort

cli.add_command(parse.parse)
cli.add_command(render.render)
cli.add_command(compare.compare)
cli.add_command(sort.sort)


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
