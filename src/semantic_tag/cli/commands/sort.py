# SPDX-License-Identifier: MIT
"""Sort semantic tags by precedence."""

from __future__ import annotations

from typing import Optional, TextIO

import click

from semantic_tag import parse_lines

from ..main import echo_info, echo_warning, pass_context, resolve_config, Context


@click.command()
@click.argument(
    "source",
    type=click.File("r", encoding="utf-8", errors="replace"),
    default="-",
)
@click.option(
    "--reverse/--no-reverse",
    default=None,
    help="Print the newest tag first.",
)
@click.option(
    "--pre-releases/--no-pre-releases",
    "include_pre_releases",
    default=None,
    help="Include or drop pre-release tags.",
)
@click.option(
    "--unique/--no-unique",
    default=None,
    help="Drop repeated tags.",
)
@pass_context
def sort(
    ctx: Context,
    source: TextIO,
    reverse: Optional[bool],
    include_pre_releases: Optional[bool],
    unique: Optional[bool],
) -> None:
    """Sort the tags read from SOURCE (default: stdin), one per line.

    Lines that do not parse are skipped. Tags of equal precedence keep their
    input order.

    \b
    Examples:
        git tag | semtag sort
        semtag sort --reverse --unique tags.txt
    """
    config = resolve_config(
        ctx,
        reverse=reverse,
        include_pre_releases=include_pre_releases,
        unique=unique,
    )

    tags = parse_lines(source)
    if not tags:
        echo_warning("No semantic tags found in input")
        return

    for tag in config.apply(tags):
        echo_info(str(tag))
