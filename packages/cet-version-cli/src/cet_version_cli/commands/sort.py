# SPDX-License-Identifier: MIT
"""Sort version strings."""

from __future__ import annotations

import logging

import click

from cet_version import ComparisonCache, latest_version, sort_versions

from ..config import ConfigError
from ..main import echo_error, echo_info, pass_context, Context

logger = logging.getLogger(__name__)


@click.command()
@click.argument("versions", nargs=-1)
@click.option(
    "--reverse",
    "-r",
    is_flag=True,
    help="Sort newest first (also enabled by reverse in [tool.cet-version]).",
)
@click.option(
    "--latest",
    is_flag=True,
    help="Print only the newest version.",
)
@pass_context
def sort(ctx: Context, versions: tuple[str, ...], reverse: bool, latest: bool) -> None:
    """Sort VERSIONS from oldest to newest.

    With no VERSIONS, versions are read from standard input, one per line.

    \b
    Examples:
        cet-version sort 1.2 1 develop 1.2rc1
        ls /products/root | cet-version sort --latest
    """
    try:
        config = ctx.load_config()
    except (ConfigError, FileNotFoundError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    items = list(versions)
    if not items:
        stdin = click.get_text_stream("stdin")
        items = [line.strip() for line in stdin if line.strip()]

    cache = ComparisonCache(maxsize=config.cache_size)

    if latest:
        newest = latest_version(items, cache=cache)
        if newest is None:
            echo_error("No versions given")
            raise SystemExit(1)
        echo_info(newest)
        return

    reverse = reverse or config.reverse

    logger.debug("Sorting %d versions (reverse=%s)", len(items), reverse)
    for version in sort_versions(items, reverse=reverse, cache=cache):
        echo_info(version)
