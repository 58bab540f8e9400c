# SPDX-License-Identifier: MIT
"""Compare the precedence of two semantic tags."""

from __future__ import annotations

import click

from semantic_tag import InvalidTagError, compare_tags, must_parse

from ..main import echo_error, echo_info

_SYMBOLS = {-1: "<", 0: "=", 1: ">"}


@click.command()
@click.argument("first")
@click.argument("second")
def compare(first: str, second: str) -> None:
    """Print <, = or > for the precedence of FIRST relative to SECOND.

    Build metadata is ignored, so v1.0.0+a and v1.0.0+b compare as =.

    \b
    Examples:
        semtag compare v1.0.0-rc.1 v1.0.0
    """
    try:
        a = must_parse(first)
        b = must_parse(second)
    except InvalidTagError as e:
        echo_error(e.message)
        raise SystemExit(1)

    echo_info(_SYMBOLS[compare_tags(a, b)])
