# SPDX-License-Identifier: MIT
"""Show the parsed components of a version string."""

from __future__ import annotations

import json

import click

from cet_version import parse_version_string

from ..main import echo_info, pass_context, Context


@click.command()
@click.argument("version")
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the populated fields as a JSON object.",
)
@pass_context
def parse(ctx: Context, version: str, as_json: bool) -> None:
    """Parse VERSION and print its components.

    Only populated fields are shown.

    \b
    Examples:
        cet-version parse 1.5.rc7
        cet-version parse --json v1_2_0_1pre6
    """
    fields = parse_version_string(version).as_dict()

    if as_json:
        echo_info(json.dumps(fields))
        return

    for name, value in fields.items():
        if name == "bits":
            value = " ".join(value)
        elif name == "extra_type":
            value = f"{int(value)} ({value.name.lower()})"
        echo_info(f"{name}: {value}")
