# SPDX-License-Identifier: MIT
"""Compare two version strings."""

from __future__ import annotations

import click

from cet_version import version_cmp

from ..main import echo_info, pass_context, Context


@click.command()
@click.argument("version1")
@click.argument("version2")
@pass_context
def compare(ctx: Context, version1: str, version2: str) -> None:
    """Compare VERSION1 with VERSION2.

    Prints -1 if VERSION1 is older, 0 if they are equal and 1 if VERSION1
    is newer.

    \b
    Examples:
        cet-version compare 1 1.2
        cet-version compare 1.5 1.5.rc7
    """
    echo_info(str(version_cmp(version1, version2)))
