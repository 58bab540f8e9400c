# SPDX-License-Identifier: MIT
"""Print the latest semantic tag."""

from __future__ import annotations

from typing import Optional, TextIO

import click

from semantic_tag import latest as latest_tag, parse_lines

from ..main import echo_error, echo_info, pass_context, resolve_config, Context


@click.command()
@click.argument(
    "source",
    type=click.File("r", encoding="utf-8", errors="replace"),
    default="-",
)
@click.option(
    "--pre-releases/--no-pre-releases",
    "include_pre_releases",
    default=None,
    help="Consider or ignore pre-release tags.",
)
@pass_context
def latest(ctx: Context, source: TextIO, include_pre_releases: Optional[bool]) -> None:
    """Print the tag with the highest precedence in SOURCE (default: stdin).

    \b
    Examples:
        git tag | semtag latest
        semtag latest --no-pre-releases tags.txt
    """
    config = resolve_config(ctx, include_pre_releases=include_pre_releases)

    tag = latest_tag(parse_lines(source), include_pre_releases=config.include_pre_releases)
    if tag is None:
        echo_error("No semantic tags found in input")
        raise SystemExit(1)

    echo_info(str(tag))
