# SPDX-License-Identifier: MIT
"""Render a version string in its canonical forms."""

from __future__ import annotations

from typing import Callable, Optional

import click

from cet_version import (
    to_cmake_version,
    to_dot_version,
    to_ups_version,
    to_version_string,
)

from ..config import RENDER_FORMS, ConfigError
from ..main import echo_error, echo_info, pass_context, Context

RENDERERS: dict[str, Callable[[str], str]] = {
    "ups": to_ups_version,
    "dot": to_dot_version,
    "cmake": to_cmake_version,
    "generic": to_version_string,
}


@click.command()
@click.argument("version")
@click.option(
    "--form",
    "-f",
    type=click.Choice(RENDER_FORMS + ("all",)),
    help="Form to render (defaults to default_form from [tool.cet-version]).",
)
@pass_context
def render(ctx: Context, version: str, form: Optional[str]) -> None:
    """Render VERSION in a canonical form.

    \b
    Forms:
        ups      v1_5rc7
        dot      1.5rc7
        cmake    1.5
        generic  1.5-rc7

    \b
    Examples:
        cet-version render v1_5_rc7 --form generic
        cet-version render 1..5. --form all
    """
    if form is None:
        try:
            form = ctx.load_config().default_form
        except (ConfigError, FileNotFoundError) as e:
            echo_error(str(e))
            raise SystemExit(1)

    if form == "all":
        for name in RENDER_FORMS:
            echo_info(f"{name}: {RENDERERS[name](version)}")
        return

    echo_info(RENDERERS[form](version))
